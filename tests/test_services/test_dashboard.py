import httpx
import pytest
import respx
from httpx import Response

from reviewhub.exceptions.custom import GooglePlacesError, HostawayError
from reviewhub.schemas.reviews import ReviewSource, ReviewStatus
from reviewhub.services.dashboard import DashboardService
from reviewhub.services.google_places import DETAILS_URL, GooglePlacesService
from reviewhub.services.hostaway import HostawayService
from reviewhub.services.review_store import ReviewStore

PLACE_IDS = {"29 Shoreditch Heights": "place-shoreditch"}

DETAILS = {
    "status": "OK",
    "result": {
        "rating": 4.5,
        "user_ratings_total": 321,
        "reviews": [
            {"author_name": "Sarah Johnson", "rating": 4, "text": "Great stay.", "time": 1725000000},
        ],
    },
}


@pytest.mark.asyncio
async def test_combined_without_google(sample_reviews):
    service = DashboardService(ReviewStore(sample_reviews))

    result = await service.combined("29 Shoreditch Heights")

    assert [r.id for r in result.reviews] == ["hostaway_7453", "hostaway_7454"]
    assert result.property_name == "29 Shoreditch Heights"
    assert result.stats.overall == 9.0
    assert result.stats.total_reviews == 2


@pytest.mark.asyncio
async def test_combined_all_properties_filters_status(sample_reviews):
    service = DashboardService(ReviewStore(sample_reviews))

    published = await service.combined()
    everything = await service.combined(status=None)

    assert len(published.reviews) == 2
    assert len(everything.reviews) == 3
    assert published.property_name == "Unknown Property"


@respx.mock
@pytest.mark.asyncio
async def test_combined_with_google(sample_reviews):
    respx.get(DETAILS_URL).mock(return_value=Response(200, json=DETAILS))

    async with httpx.AsyncClient() as client:
        google = GooglePlacesService(client, "test-key", place_ids=PLACE_IDS)
        service = DashboardService(ReviewStore(sample_reviews), google_places=google)
        result = await service.combined("29 Shoreditch Heights")

    assert [r.source for r in result.reviews] == [
        ReviewSource.google,
        ReviewSource.hostaway,
        ReviewSource.hostaway,
    ]
    assert result.reviews[0].overall_rating == 8
    assert result.stats.sources.google.total_reviews == 321
    assert result.stats.overall == 8.5


@respx.mock
@pytest.mark.asyncio
async def test_google_failure_degrades_to_internal(sample_reviews):
    respx.get(DETAILS_URL).mock(return_value=Response(500, text="boom"))

    async with httpx.AsyncClient() as client:
        google = GooglePlacesService(client, "test-key", place_ids=PLACE_IDS)
        service = DashboardService(ReviewStore(sample_reviews), google_places=google)
        result = await service.combined("29 Shoreditch Heights")

    assert all(r.source == ReviewSource.hostaway for r in result.reviews)
    assert result.stats.sources.google.count == 0


@pytest.mark.asyncio
async def test_google_reviews_requires_key():
    service = DashboardService(ReviewStore())

    with pytest.raises(GooglePlacesError):
        await service.google_reviews("29 Shoreditch Heights")


@pytest.mark.asyncio
async def test_sync_requires_hostaway():
    service = DashboardService(ReviewStore())

    assert not service.hostaway_enabled
    with pytest.raises(HostawayError):
        await service.sync()


@respx.mock
@pytest.mark.asyncio
async def test_sync_loads_store():
    base_url = "https://api.hostaway.test/v1"
    respx.post(f"{base_url}/accessTokens").mock(return_value=Response(
        200, json={"token_type": "Bearer", "expires_in": 3600, "access_token": "t"},
    ))
    respx.get(f"{base_url}/reviews").mock(return_value=Response(200, json={
        "status": "success",
        "result": [
            {"id": 1, "type": "guest-to-host", "status": "pending", "rating": 8,
             "submittedAt": "2024-05-01 10:00:00", "listingName": "Canary Wharf"},
        ],
    }))

    async with httpx.AsyncClient() as client:
        hostaway = HostawayService(client, "id", "secret", base_url=base_url)
        service = DashboardService(ReviewStore(), hostaway=hostaway)
        synced = await service.sync()

    assert synced == 1
    assert service.store.get(1).status == ReviewStatus.pending


def test_resolve_listing(sample_reviews):
    service = DashboardService(ReviewStore(sample_reviews))

    assert service.resolve_listing("1b-central-london-modern-flat") == "1B Central London - Modern Flat"
    assert service.resolve_listing("nowhere") is None
