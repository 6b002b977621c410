import logging
from collections import Counter
from datetime import datetime

from pydantic import BaseModel, Field

from reviewhub.mappers.rating import mean, round_rating
from reviewhub.mappers.review_mapper import map_review
from reviewhub.schemas.google_places import GoogleReview
from reviewhub.schemas.hostaway import InternalReview
from reviewhub.schemas.reviews import (
    CombinedReview,
    CombinedReviewsStats,
    ReviewSource,
    SourcesStats,
    SourceStats,
)

logger = logging.getLogger(__name__)


class AggregatedReviews(BaseModel):
    reviews: list[CombinedReview] = []
    stats: CombinedReviewsStats = Field(default_factory=CombinedReviewsStats)


def _rated(reviews: list[CombinedReview]) -> list[float]:
    return [r.overall_rating for r in reviews if r.overall_rating is not None]


def sort_by_recency(reviews: list[CombinedReview]) -> list[CombinedReview]:
    """Newest first. Reviews with equal timestamps keep their input order."""
    return sorted(reviews, key=lambda r: r.submitted_at, reverse=True)


def category_averages(reviews: list[CombinedReview]) -> dict[str, float]:
    """Average each category over the reviews that define it.

    A review missing a key (or holding None for it) does not count toward
    that category. Keys appear in first-seen order.
    """
    totals: dict[str, list[float]] = {}
    for review in reviews:
        for category, rating in review.categories.items():
            if rating is None:
                continue
            totals.setdefault(category, []).append(rating)
    return {category: round_rating(mean(values)) for category, values in totals.items()}


def _source_stats(reviews: list[CombinedReview], total_reviews: int | None = None) -> SourceStats:
    return SourceStats(
        count=len(reviews),
        average_rating=round_rating(mean(_rated(reviews))),
        total_reviews=len(reviews) if total_reviews is None else total_reviews,
    )


def compute_stats(
    reviews: list[CombinedReview],
    google_total_reviews: int | None = None,
) -> CombinedReviewsStats:
    """Statistics over an already-mapped review collection.

    Unrated reviews are left out of every average. `overall` is the mean of
    all rated reviews across sources, not a mean of per-source means.
    """
    hostaway = [r for r in reviews if r.source == ReviewSource.hostaway]
    google = [r for r in reviews if r.source == ReviewSource.google]

    return CombinedReviewsStats(
        overall=round_rating(mean(_rated(reviews))),
        total_reviews=len(hostaway) + len(google),
        categories=category_averages(hostaway),
        review_types=dict(Counter(str(r.type) for r in reviews)),
        sources=SourcesStats(
            google=_source_stats(google, google_total_reviews),
            hostaway=_source_stats(hostaway),
        ),
    )


def aggregate(
    internal: list[InternalReview],
    google: list[GoogleReview],
    google_total_reviews: int | None = None,
    property_name: str | None = None,
    now: datetime | None = None,
) -> AggregatedReviews:
    """Merge both sources into one newest-first collection plus its stats.

    Internal reviews precede Google reviews before the stable sort, so the
    result depends only on the arguments, never on which fetch finished
    first. `google_total_reviews` is the upstream review count of the place,
    when known.
    """
    batches = ((ReviewSource.hostaway, internal), (ReviewSource.google, google))
    mapped = [
        map_review(source, review, now=now, property_name=property_name)
        for source, batch in batches
        for review in batch
    ]

    reviews = sort_by_recency(mapped)
    stats = compute_stats(reviews, google_total_reviews)

    logger.debug(
        "Aggregated %d internal and %d Google reviews (overall=%.1f)",
        len(internal), len(google), stats.overall,
    )
    return AggregatedReviews(reviews=reviews, stats=stats)
