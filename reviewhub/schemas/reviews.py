from datetime import datetime, timezone
from enum import StrEnum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def ensure_utc(value: datetime) -> datetime:
    """Naive timestamps are taken as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ReviewType(StrEnum):
    host_to_guest = "host-to-guest"
    guest_to_host = "guest-to-host"


class ReviewStatus(StrEnum):
    published = "published"
    pending = "pending"
    draft = "draft"


class ReviewSource(StrEnum):
    hostaway = "hostaway"
    google = "google"


class SortBy(StrEnum):
    date = "date"
    rating = "rating"
    guest_name = "guestName"


class SortOrder(StrEnum):
    asc = "asc"
    desc = "desc"


class CombinedReview(FrozenCamelModel):
    id: str
    source: ReviewSource
    author: str = ""
    author_photo: str | None = None
    author_url: str | None = None
    rating: float | None = None  # native scale of the source
    overall_rating: float | None = None  # always 1-10
    text: str = ""
    comment: str = ""
    created_at: str = ""
    submitted_at: UtcDatetime
    relative_time: str | None = None
    language: str = "en"
    original_language: str | None = None
    translated: bool = False
    guest_name: str = ""
    listing_name: str = ""
    property_name: str = ""
    type: ReviewType
    status: ReviewStatus
    categories: dict[str, float | None] = {}
    channel: str | None = None


class SourceStats(CamelModel):
    count: int = 0
    average_rating: float = 0.0
    total_reviews: int = 0


class SourcesStats(CamelModel):
    google: SourceStats = Field(default_factory=SourceStats)
    hostaway: SourceStats = Field(default_factory=SourceStats)


class CombinedReviewsStats(CamelModel):
    overall: float = 0.0
    total_reviews: int = 0
    categories: dict[str, float] = {}
    review_types: dict[str, int] = {}
    sources: SourcesStats = Field(default_factory=SourcesStats)


class DateRange(FrozenCamelModel):
    start: UtcDatetime | None = Field(default=None, alias="from")
    end: UtcDatetime | None = Field(default=None, alias="to")


class FilterSpecification(FrozenCamelModel):
    search_term: str | None = None
    type: ReviewType | None = None
    status: ReviewStatus | None = None
    listing_name: str | None = None
    min_rating: float | None = None
    max_rating: float | None = None
    sort_order: SortOrder = SortOrder.desc
    sort_by: SortBy | None = None
    date_range: DateRange | None = None
    source_filter: ReviewSource | None = None
    language: str | None = None
    category: str | None = None

    @field_validator("type", "status", "source_filter", mode="before")
    @classmethod
    def _all_means_unset(cls, value):
        if value in ("all", ""):
            return None
        return value


class PageInfo(CamelModel):
    page: int
    page_size: int
    total_items: int
    total_pages: int
    start_index: int
    end_index: int
    has_next: bool
    has_previous: bool
    window_start: int = 1
    window_end: int = 1
