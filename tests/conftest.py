from datetime import datetime, timezone

import httpx
import pytest
from httpx import ASGITransport

from reviewhub.schemas.hostaway import InternalReview


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "test-key")
    monkeypatch.setenv("GOOGLE_PLACE_IDS", '{"29 Shoreditch Heights": "place-shoreditch"}')
    monkeypatch.delenv("HOSTAWAY_CLIENT_ID", raising=False)
    monkeypatch.delenv("HOSTAWAY_CLIENT_SECRET", raising=False)


@pytest.fixture
def sample_reviews() -> list[InternalReview]:
    utc = timezone.utc
    return [
        InternalReview(
            id=7453,
            guest_name="Shane Finkelstein",
            listing_name="29 Shoreditch Heights",
            comment="Shane and family are wonderful! Would definitely host again :)",
            overall_rating=None,
            type="host-to-guest",
            status="published",
            submitted_at=datetime(2024, 8, 21, 22, 45, 14, tzinfo=utc),
            categories={"cleanliness": 10, "communication": 10},
        ),
        InternalReview(
            id=7454,
            guest_name="Maria Rodriguez",
            listing_name="29 Shoreditch Heights",
            comment="Great location and very clean apartment.",
            overall_rating=9,
            type="guest-to-host",
            status="published",
            submitted_at=datetime(2024, 8, 20, 15, 30, tzinfo=utc),
            categories={"cleanliness": 9, "communication": 10, "location": 10},
        ),
        InternalReview(
            id=7455,
            guest_name="John Smith",
            listing_name="1B Central London - Modern Flat",
            comment="Noisy street, otherwise fine.",
            overall_rating=6,
            type="guest-to-host",
            status="pending",
            submitted_at=datetime(2024, 7, 19, 9, 15, 22, tzinfo=utc),
            categories={"cleanliness": 7},
        ),
    ]


@pytest.fixture
async def client(mock_env, sample_reviews):
    from reviewhub.main import app, lifespan

    async with lifespan(app):
        app.state.dashboard_service.store.load(sample_reviews)
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
