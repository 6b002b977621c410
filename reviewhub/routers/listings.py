from fastapi import APIRouter, HTTPException

from reviewhub.dependencies import DashboardDep
from reviewhub.schemas.responses import CombinedReviewsResponse, ListingSummary
from reviewhub.services.listings import summarize_listings

router = APIRouter(prefix="/listings")


@router.get("", response_model=list[ListingSummary])
async def list_listings(service: DashboardDep) -> list[ListingSummary]:
    combined = await service.combined(include_google=False)
    return summarize_listings(combined.reviews)


@router.get("/{slug}", response_model=CombinedReviewsResponse)
async def listing_reviews(
    slug: str,
    service: DashboardDep,
    include_google: bool = True,
    language: str = "en",
) -> CombinedReviewsResponse:
    listing_name = service.resolve_listing(slug)
    if listing_name is None:
        raise HTTPException(status_code=404, detail="Listing not found")

    combined = await service.combined(
        property_name=listing_name,
        include_google=include_google,
        language=language,
    )
    return CombinedReviewsResponse(
        reviews=combined.reviews,
        stats=combined.stats,
        total_count=len(combined.reviews),
        filtered_count=len(combined.reviews),
        property_name=combined.property_name,
        last_updated=combined.last_updated,
    )
