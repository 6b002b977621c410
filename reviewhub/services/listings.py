from typing import TypeVar

from reviewhub.mappers.rating import mean, round_rating
from reviewhub.mappers.slugs import create_listing_slug
from reviewhub.schemas.hostaway import InternalReview
from reviewhub.schemas.reviews import CombinedReview
from reviewhub.schemas.responses import ListingSummary

ReviewT = TypeVar("ReviewT", CombinedReview, InternalReview)


def group_by_listing(reviews: list[ReviewT]) -> dict[str, list[ReviewT]]:
    groups: dict[str, list[ReviewT]] = {}
    for review in reviews:
        groups.setdefault(review.listing_name, []).append(review)
    return groups


def group_by_type(reviews: list[ReviewT]) -> dict[str, list[ReviewT]]:
    groups: dict[str, list[ReviewT]] = {}
    for review in reviews:
        groups.setdefault(str(review.type), []).append(review)
    return groups


def summarize_listings(reviews: list[CombinedReview]) -> list[ListingSummary]:
    """One summary per listing, most reviewed first.

    The sample review is the first review of the listing in input order.
    """
    summaries = []
    for name, listing_reviews in group_by_listing(reviews).items():
        rated = [r.overall_rating for r in listing_reviews if r.overall_rating is not None]
        summaries.append(ListingSummary(
            name=name,
            slug=create_listing_slug(name),
            review_count=len(listing_reviews),
            average_rating=round_rating(mean(rated)),
            latest_review=max(r.submitted_at for r in listing_reviews),
            sample_review=listing_reviews[0].comment,
        ))
    summaries.sort(key=lambda s: s.review_count, reverse=True)
    return summaries
