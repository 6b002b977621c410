import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query

from reviewhub.dependencies import DashboardDep, SettingsDep
from reviewhub.schemas.analytics import AnalyticsReport
from reviewhub.schemas.google_places import GoogleReviewsPayload
from reviewhub.schemas.responses import (
    CombinedReviewsRequest,
    CombinedReviewsResponse,
    ModerationResponse,
    ReviewsApiResponse,
    ReviewStatistics,
    StatusUpdateRequest,
    SyncResponse,
)
from reviewhub.schemas.reviews import ReviewStatus, ReviewType, SortOrder
from reviewhub.services.aggregator import aggregate
from reviewhub.services.analytics import build_report
from reviewhub.services.filters import apply_filters
from reviewhub.services.listings import group_by_listing, group_by_type
from reviewhub.services.pagination import paginate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews")


@router.get("", response_model=ReviewsApiResponse)
async def list_reviews(
    service: DashboardDep,
    review_type: Annotated[ReviewType | None, Query(alias="type")] = None,
    status: ReviewStatus | None = None,
    listing_name: Annotated[str | None, Query(alias="listingName")] = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
    sort_order: Annotated[SortOrder, Query(alias="sortOrder")] = SortOrder.desc,
    include_stats: Annotated[bool, Query(alias="includeStats")] = False,
    group_by: Annotated[str | None, Query(alias="groupBy", pattern="^(listing|type)$")] = None,
) -> ReviewsApiResponse:
    reviews = service.store.query(
        type=review_type,
        status=status,
        listing_name=listing_name,
        sort_order=sort_order,
        limit=limit,
    )

    data = reviews
    if group_by == "listing":
        data = group_by_listing(reviews)
    elif group_by == "type":
        data = group_by_type(reviews)

    statistics = None
    if include_stats:
        stats = aggregate(reviews, []).stats
        statistics = ReviewStatistics(
            overall=stats.overall,
            categories=stats.categories,
            total_reviews=stats.total_reviews,
            review_types=stats.review_types,
        )

    return ReviewsApiResponse(
        status="success",
        data=data,
        total=len(reviews),
        statistics=statistics,
        grouped_by=group_by,
    )


@router.get("/google", response_model=GoogleReviewsPayload)
async def google_reviews(
    service: DashboardDep,
    property_name: Annotated[str | None, Query(alias="propertyName")] = None,
    language: str = "en",
) -> GoogleReviewsPayload:
    return await service.google_reviews(property_name, language=language)


@router.post("/combined", response_model=CombinedReviewsResponse)
async def combined_reviews(
    request: CombinedReviewsRequest,
    service: DashboardDep,
    settings: SettingsDep,
) -> CombinedReviewsResponse:
    combined = await service.combined(
        property_name=request.property_name,
        include_google=request.include_google,
        language=request.language,
        status=request.status,
    )

    filtered = apply_filters(combined.reviews, request.filters)
    page_size = min(request.page_size or settings.default_page_size, settings.max_page_size)
    page, info = paginate(filtered, request.page, page_size)

    return CombinedReviewsResponse(
        reviews=page,
        stats=combined.stats,
        pagination=info,
        total_count=len(combined.reviews),
        filtered_count=len(filtered),
        property_name=combined.property_name,
        last_updated=combined.last_updated,
    )


@router.get("/analytics", response_model=AnalyticsReport)
async def analytics(
    service: DashboardDep,
    property_name: Annotated[str | None, Query(alias="propertyName")] = None,
    include_google: Annotated[bool, Query(alias="includeGoogle")] = True,
    status: ReviewStatus | None = None,
) -> AnalyticsReport:
    combined = await service.combined(
        property_name=property_name,
        include_google=include_google,
        status=status,
    )
    return build_report(combined.reviews)


@router.post("/sync", response_model=SyncResponse)
async def sync_reviews(service: DashboardDep) -> SyncResponse:
    if not service.hostaway_enabled:
        raise HTTPException(status_code=503, detail="Hostaway is not configured")
    synced = await service.sync()
    return SyncResponse(synced=synced, total=service.store.count())


@router.patch("/{review_id}", response_model=ModerationResponse)
async def update_review_status(
    review_id: int,
    request: StatusUpdateRequest,
    service: DashboardDep,
) -> ModerationResponse:
    review = service.store.update_status(review_id, request.status)
    return ModerationResponse(success=True, data=review)


@router.delete("/{review_id}", response_model=ModerationResponse)
async def delete_review(review_id: int, service: DashboardDep) -> ModerationResponse:
    review = service.store.delete(review_id)
    return ModerationResponse(success=True, data=review, message="Review deleted successfully")
