from datetime import datetime
from typing import Callable

from reviewhub.mappers.rating import GOOGLE_SCALE, HOSTAWAY_SCALE, normalize_rating
from reviewhub.mappers.relative_time import relative_time
from reviewhub.schemas.google_places import GoogleReview
from reviewhub.schemas.hostaway import InternalReview
from reviewhub.schemas.reviews import CombinedReview, ReviewSource, ReviewStatus, ReviewType

HOSTAWAY_ID_PREFIX = "hostaway_"
DEFAULT_LANGUAGE = "en"


def map_internal_review(review: InternalReview, now: datetime | None = None) -> CombinedReview:
    """Map an internal-API review to the combined shape.

    The id gets a "hostaway_" prefix so it cannot collide with Google ids.
    An absent overall rating stays None.
    """
    overall = normalize_rating(review.overall_rating, HOSTAWAY_SCALE)
    return CombinedReview(
        id=f"{HOSTAWAY_ID_PREFIX}{review.id}",
        source=ReviewSource.hostaway,
        author=review.guest_name,
        rating=review.overall_rating,
        overall_rating=overall,
        text=review.comment,
        comment=review.comment,
        created_at=review.submitted_at.isoformat(),
        submitted_at=review.submitted_at,
        relative_time=relative_time(review.submitted_at, now),
        language=DEFAULT_LANGUAGE,
        translated=False,
        guest_name=review.guest_name,
        listing_name=review.listing_name,
        property_name=review.listing_name,
        type=review.type,
        status=review.status,
        categories=dict(review.categories),
        channel=review.channel,
    )


def map_google_review(review: GoogleReview, property_name: str | None = None) -> CombinedReview:
    """Map a Google review to the combined shape.

    Google reviews are always published guest-to-host reviews without
    category ratings. The native 1-5 rating is kept next to the 1-10 one.
    """
    listing = property_name or review.property_name
    language = review.language or DEFAULT_LANGUAGE
    return CombinedReview(
        id=review.id,
        source=ReviewSource.google,
        author=review.author,
        author_photo=review.author_photo,
        author_url=review.author_url,
        rating=review.rating,
        overall_rating=normalize_rating(review.rating, GOOGLE_SCALE),
        text=review.text,
        comment=review.text,
        created_at=review.created_at.isoformat(),
        submitted_at=review.created_at,
        relative_time=review.relative_time,
        language=language,
        original_language=review.original_language or language,
        translated=review.translated,
        guest_name=review.author,
        listing_name=listing,
        property_name=listing,
        type=ReviewType.guest_to_host,
        status=ReviewStatus.published,
        categories={},
    )


def _internal_entry(review, now, property_name):
    return map_internal_review(review, now)


def _google_entry(review, now, property_name):
    return map_google_review(review, property_name)


SOURCE_MAPPERS: dict[ReviewSource, Callable[..., CombinedReview]] = {
    ReviewSource.hostaway: _internal_entry,
    ReviewSource.google: _google_entry,
}


def map_review(
    source: ReviewSource,
    review: InternalReview | GoogleReview,
    now: datetime | None = None,
    property_name: str | None = None,
) -> CombinedReview:
    """Map a review of the given source. Each mapper takes the context it needs."""
    return SOURCE_MAPPERS[source](review, now, property_name)
