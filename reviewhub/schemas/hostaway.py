from pydantic import BaseModel

from reviewhub.schemas.reviews import FrozenCamelModel, ReviewStatus, ReviewType, UtcDatetime


class HostawayTokenResponse(BaseModel):
    token_type: str = "Bearer"
    expires_in: int
    access_token: str


class HostawayReviewCategory(BaseModel):
    category: str
    rating: float | None = None


class HostawayReview(BaseModel):
    id: int
    type: str
    status: str = "published"
    rating: float | None = None
    publicReview: str | None = None
    reviewCategory: list[HostawayReviewCategory] = []
    submittedAt: str
    guestName: str | None = None
    listingName: str | None = None


class HostawayReviewsResponse(BaseModel):
    status: str
    result: list[HostawayReview] = []
    message: str | None = None


class InternalReview(FrozenCamelModel):
    """A review from the internal reviews API, ratings on the 1-10 scale."""

    id: int
    guest_name: str = ""
    listing_name: str = ""
    comment: str = ""
    overall_rating: float | None = None
    type: ReviewType
    status: ReviewStatus = ReviewStatus.published
    submitted_at: UtcDatetime
    categories: dict[str, float | None] = {}
    channel: str = "hostaway"
