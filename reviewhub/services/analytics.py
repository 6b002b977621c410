import math
from collections import Counter
from datetime import datetime

from reviewhub.mappers.rating import mean, round_rating
from reviewhub.schemas.analytics import (
    AnalyticsReport,
    CategoryAverage,
    MonthlyTrendPoint,
    PropertyTrendPoint,
    QualityMetrics,
    RadarPoint,
    RetentionMetrics,
    ReviewTypeSplit,
    SatisfactionTrendPoint,
    StatusCount,
)
from reviewhub.schemas.reviews import CombinedReview, ReviewType

RADAR_CATEGORIES = ("cleanliness", "communication", "location", "accuracy", "check_in", "value")
HIGH_RATING_THRESHOLD = 8
TOP_PROPERTIES = 10


def month_key(value: datetime) -> str:
    # zero-padded so that string order is chronological order
    return f"{value.year:04d}-{value.month:02d}"


def month_label(key: str) -> str:
    return datetime.strptime(key, "%Y-%m").strftime("%b %Y")


def category_label(category: str) -> str:
    return category.replace("_", " ").title()


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def percent(part: int, whole: int) -> int:
    """Whole-number percentage, 0 when there is nothing to divide by."""
    if whole == 0:
        return 0
    return round_half_up(part / whole * 100)


def monthly_trend(reviews: list[CombinedReview]) -> list[MonthlyTrendPoint]:
    """Average rating and review count per calendar month, oldest first.

    Only rated reviews are counted.
    """
    buckets: dict[str, list[float]] = {}
    for review in reviews:
        if review.overall_rating is None:
            continue
        buckets.setdefault(month_key(review.submitted_at), []).append(review.overall_rating)

    return [
        MonthlyTrendPoint(
            month=key,
            label=month_label(key),
            average_rating=round_rating(mean(ratings)),
            count=len(ratings),
        )
        for key, ratings in sorted(buckets.items())
    ]


def property_trend(reviews: list[CombinedReview], limit: int = TOP_PROPERTIES) -> list[PropertyTrendPoint]:
    """Best-rated listings first, capped at `limit`."""
    buckets: dict[str, list[float]] = {}
    for review in reviews:
        if review.overall_rating is None:
            continue
        buckets.setdefault(review.listing_name, []).append(review.overall_rating)

    points = [
        PropertyTrendPoint(property=name, average_rating=round_rating(mean(ratings)), count=len(ratings))
        for name, ratings in buckets.items()
    ]
    points.sort(key=lambda p: p.average_rating, reverse=True)
    return points[:limit]


def _category_ratings(reviews: list[CombinedReview], category: str) -> list[float]:
    return [
        rating for r in reviews
        if (rating := r.categories.get(category)) is not None
    ]


def category_breakdown(reviews: list[CombinedReview]) -> list[CategoryAverage]:
    seen: list[str] = []
    for review in reviews:
        for category in review.categories:
            if category not in seen:
                seen.append(category)

    averages = []
    for category in seen:
        ratings = _category_ratings(reviews, category)
        if not ratings:
            continue
        averages.append(CategoryAverage(
            category=category,
            label=category_label(category),
            average_rating=round_rating(mean(ratings)),
            count=len(ratings),
        ))
    averages.sort(key=lambda c: c.average_rating, reverse=True)
    return averages


def category_radar(reviews: list[CombinedReview]) -> list[RadarPoint]:
    """Fixed six-axis category profile; an axis nobody rated reads 0."""
    return [
        RadarPoint(
            category=category,
            label=category_label(category),
            value=round_rating(mean(_category_ratings(reviews, category))),
        )
        for category in RADAR_CATEGORIES
    ]


def status_distribution(reviews: list[CombinedReview]) -> list[StatusCount]:
    counts = Counter(str(r.status) for r in reviews)
    return [
        StatusCount(status=status, label=status.capitalize(), count=count)
        for status, count in counts.items()
    ]


def satisfaction_trend(reviews: list[CombinedReview]) -> list[SatisfactionTrendPoint]:
    """Monthly satisfaction (rating as % of 10), split guest vs host reviews."""
    buckets: dict[str, dict[ReviewType, list[float]]] = {}
    for review in reviews:
        if review.overall_rating is None:
            continue
        month = buckets.setdefault(
            month_key(review.submitted_at),
            {ReviewType.guest_to_host: [], ReviewType.host_to_guest: []},
        )
        month[review.type].append(review.overall_rating / 10 * 100)

    return [
        SatisfactionTrendPoint(
            month=key,
            label=month_label(key),
            satisfaction=round_rating(mean(sides[ReviewType.guest_to_host])),
            host_satisfaction=round_rating(mean(sides[ReviewType.host_to_guest])),
        )
        for key, sides in sorted(buckets.items())
    ]


def quality_metrics(reviews: list[CombinedReview]) -> QualityMetrics:
    rated = [r.overall_rating for r in reviews if r.overall_rating is not None]
    high = [rating for rating in rated if rating >= HIGH_RATING_THRESHOLD]
    return QualityMetrics(
        satisfaction=percent(len(high), len(rated)),
        completion_rate=percent(len(rated), len(reviews)),
        rated_reviews=len(rated),
        total_reviews=len(reviews),
    )


def retention_metrics(reviews: list[CombinedReview]) -> RetentionMetrics:
    """Classify guests by review count: 1 new, 2 returning, 3+ VIP.

    Reviews without a guest name cannot be attributed and are skipped.
    """
    per_guest = Counter(r.guest_name for r in reviews if r.guest_name.strip())
    new = sum(1 for count in per_guest.values() if count == 1)
    returning = sum(1 for count in per_guest.values() if count == 2)
    vip = sum(1 for count in per_guest.values() if count >= 3)
    return RetentionMetrics(
        new_guests=new,
        returning_guests=returning,
        vip_guests=vip,
        repeat_guest_rate=percent(returning + vip, len(per_guest)),
    )


def review_type_split(reviews: list[CombinedReview]) -> ReviewTypeSplit:
    host = sum(1 for r in reviews if r.type == ReviewType.host_to_guest)
    guest = sum(1 for r in reviews if r.type == ReviewType.guest_to_host)
    total = len(reviews)
    return ReviewTypeSplit(
        host_to_guest=host,
        guest_to_host=guest,
        host_to_guest_percent=round_rating(host / total * 100) if total else 0.0,
        guest_to_host_percent=round_rating(guest / total * 100) if total else 0.0,
    )


def build_report(reviews: list[CombinedReview]) -> AnalyticsReport:
    return AnalyticsReport(
        monthly_trend=monthly_trend(reviews),
        property_trend=property_trend(reviews),
        category_breakdown=category_breakdown(reviews),
        category_radar=category_radar(reviews),
        status_distribution=status_distribution(reviews),
        satisfaction_trend=satisfaction_trend(reviews),
        quality=quality_metrics(reviews),
        retention=retention_metrics(reviews),
        review_types=review_type_split(reviews),
    )
