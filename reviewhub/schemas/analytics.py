from pydantic import Field

from reviewhub.schemas.reviews import CamelModel


class MonthlyTrendPoint(CamelModel):
    month: str  # "YYYY-MM"
    label: str  # "Jan 2024"
    average_rating: float
    count: int


class PropertyTrendPoint(CamelModel):
    property: str
    average_rating: float
    count: int


class CategoryAverage(CamelModel):
    category: str
    label: str
    average_rating: float
    count: int


class RadarPoint(CamelModel):
    category: str
    label: str
    value: float


class StatusCount(CamelModel):
    status: str
    label: str
    count: int


class SatisfactionTrendPoint(CamelModel):
    month: str
    label: str
    satisfaction: float
    host_satisfaction: float


class QualityMetrics(CamelModel):
    satisfaction: int = 0
    completion_rate: int = 0
    rated_reviews: int = 0
    total_reviews: int = 0


class RetentionMetrics(CamelModel):
    new_guests: int = 0
    returning_guests: int = 0
    vip_guests: int = 0
    repeat_guest_rate: int = 0


class ReviewTypeSplit(CamelModel):
    host_to_guest: int = 0
    guest_to_host: int = 0
    host_to_guest_percent: float = 0.0
    guest_to_host_percent: float = 0.0


class AnalyticsReport(CamelModel):
    monthly_trend: list[MonthlyTrendPoint] = []
    property_trend: list[PropertyTrendPoint] = []
    category_breakdown: list[CategoryAverage] = []
    category_radar: list[RadarPoint] = []
    status_distribution: list[StatusCount] = []
    satisfaction_trend: list[SatisfactionTrendPoint] = []
    quality: QualityMetrics = Field(default_factory=QualityMetrics)
    retention: RetentionMetrics = Field(default_factory=RetentionMetrics)
    review_types: ReviewTypeSplit = Field(default_factory=ReviewTypeSplit)
