from __future__ import annotations

from datetime import datetime

from pydantic import Field

from reviewhub.schemas.hostaway import InternalReview
from reviewhub.schemas.reviews import (
    CamelModel,
    CombinedReview,
    CombinedReviewsStats,
    FilterSpecification,
    PageInfo,
    ReviewStatus,
)


class ReviewStatistics(CamelModel):
    overall: float
    categories: dict[str, float]
    total_reviews: int
    review_types: dict[str, int]


class ReviewsApiResponse(CamelModel):
    status: str  # "success" | "error"
    data: list[InternalReview] | dict[str, list[InternalReview]]
    total: int
    message: str | None = None
    statistics: ReviewStatistics | None = None
    grouped_by: str | None = None


class ListingSummary(CamelModel):
    name: str
    slug: str
    review_count: int
    average_rating: float
    latest_review: datetime | None = None
    sample_review: str = ""


class CombinedReviewsRequest(CamelModel):
    property_name: str | None = None
    include_google: bool = True
    language: str = "en"
    status: ReviewStatus | None = ReviewStatus.published
    filters: FilterSpecification = Field(default_factory=FilterSpecification)
    page: int = 1
    page_size: int | None = None


class CombinedReviewsResponse(CamelModel):
    reviews: list[CombinedReview]
    stats: CombinedReviewsStats
    pagination: PageInfo | None = None
    total_count: int
    filtered_count: int
    property_name: str
    last_updated: datetime


class StatusUpdateRequest(CamelModel):
    status: ReviewStatus


class ModerationResponse(CamelModel):
    success: bool
    data: InternalReview | None = None
    message: str | None = None


class SyncResponse(CamelModel):
    synced: int
    total: int
