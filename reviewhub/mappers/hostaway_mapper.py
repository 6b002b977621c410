import logging

from pydantic import ValidationError

from reviewhub.mappers.rating import round_rating
from reviewhub.schemas.hostaway import HostawayReview, InternalReview
from reviewhub.schemas.reviews import ReviewStatus, ReviewType

logger = logging.getLogger(__name__)

KNOWN_CATEGORIES = (
    "cleanliness",
    "communication",
    "respect_house_rules",
    "accuracy",
    "location",
    "check_in",
    "value",
)

# statuses outside the dashboard's set wait for moderation
UNKNOWN_STATUS_DEFAULT = ReviewStatus.pending


def _status(raw: str) -> ReviewStatus:
    try:
        return ReviewStatus(raw)
    except ValueError:
        logger.warning("Unknown Hostaway review status %r, using %s", raw, UNKNOWN_STATUS_DEFAULT)
        return UNKNOWN_STATUS_DEFAULT


def normalize_hostaway_review(review: HostawayReview) -> InternalReview | None:
    """Map a raw Hostaway API review to an InternalReview.

    The category list becomes a map restricted to known keys. When the
    review has no overall rating, the mean of its category ratings is used
    (one decimal); with no categories either, the review stays unrated.

    An unknown status becomes "pending". A record that still cannot be
    mapped (unknown type, unparseable date) is skipped and None returned.
    """
    categories: dict[str, float | None] = {}
    for cat in review.reviewCategory:
        if cat.category in KNOWN_CATEGORIES:
            categories[cat.category] = cat.rating

    overall = review.rating
    if overall is None:
        rated = [cat.rating for cat in review.reviewCategory if cat.rating is not None]
        if rated:
            overall = round_rating(sum(rated) / len(rated))

    if review.type not in {t.value for t in ReviewType}:
        logger.warning("Skipping Hostaway review %s: unknown type %r", review.id, review.type)
        return None

    try:
        return InternalReview(
            id=review.id,
            guest_name=review.guestName or "",
            listing_name=review.listingName or "",
            comment=review.publicReview or "",
            overall_rating=overall,
            type=review.type,
            status=_status(review.status),
            submitted_at=review.submittedAt,
            categories=categories,
            channel="hostaway",
        )
    except ValidationError as exc:
        logger.warning("Skipping malformed Hostaway review %s: %s", review.id, exc)
        return None
