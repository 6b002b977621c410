from datetime import datetime

from pydantic import BaseModel

from reviewhub.schemas.reviews import CamelModel, FrozenCamelModel, UtcDatetime


class PlaceReview(BaseModel):
    author_name: str = ""
    author_url: str | None = None
    profile_photo_url: str | None = None
    rating: float
    text: str = ""
    time: int
    relative_time_description: str | None = None
    language: str | None = None
    original_language: str | None = None
    translated: bool = False


class PlaceDetailsResult(BaseModel):
    reviews: list[PlaceReview] = []
    rating: float | None = None
    user_ratings_total: int | None = None


class PlaceDetailsResponse(BaseModel):
    status: str
    result: PlaceDetailsResult | None = None
    error_message: str | None = None


class GoogleReview(FrozenCamelModel):
    """A Google Places review, rating on the 1-5 scale."""

    id: str
    author: str = ""
    author_photo: str | None = None
    author_url: str | None = None
    rating: float
    text: str = ""
    created_at: UtcDatetime
    relative_time: str | None = None
    language: str | None = None
    original_language: str | None = None
    translated: bool = False
    property_name: str = ""


class GoogleReviewsPayload(CamelModel):
    reviews: list[GoogleReview] = []
    average_rating: float = 0.0
    total_reviews: int = 0
    property_name: str
    place_id: str | None = None
    last_updated: datetime | None = None
