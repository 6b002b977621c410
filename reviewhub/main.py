import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from reviewhub.config import Settings
from reviewhub.exceptions.custom import (
    GooglePlacesError,
    HostawayError,
    RateLimitError,
    ReviewNotFoundError,
)
from reviewhub.exceptions.handlers import (
    google_places_error_handler,
    hostaway_error_handler,
    rate_limit_error_handler,
    review_not_found_handler,
)
from reviewhub.routers.listings import router as listings_router
from reviewhub.routers.reviews import router as reviews_router
from reviewhub.services.dashboard import DashboardService
from reviewhub.services.google_places import GooglePlacesService
from reviewhub.services.hostaway import HostawayService
from reviewhub.services.review_store import ReviewStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=30.0) as client:
        google_places: GooglePlacesService | None = None
        if settings.google_places_api_key:
            google_places = GooglePlacesService(
                client,
                settings.google_places_api_key,
                place_ids=settings.google_place_ids,
                fallback_place_id=settings.google_fallback_place_id,
            )

        hostaway: HostawayService | None = None
        if settings.hostaway_client_id and settings.hostaway_client_secret:
            hostaway = HostawayService(
                client,
                settings.hostaway_client_id,
                settings.hostaway_client_secret,
                base_url=settings.hostaway_base_url,
            )

        dashboard = DashboardService(ReviewStore(), google_places=google_places, hostaway=hostaway)
        if hostaway is not None:
            try:
                await dashboard.sync()
            except (HostawayError, RateLimitError, httpx.HTTPError) as exc:
                logger.warning("Initial Hostaway sync failed: %s", exc)

        app.state.settings = settings
        app.state.dashboard_service = dashboard

        yield


app = FastAPI(title="Review Hub", lifespan=lifespan)

app.add_exception_handler(HostawayError, hostaway_error_handler)
app.add_exception_handler(GooglePlacesError, google_places_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)
app.add_exception_handler(ReviewNotFoundError, review_not_found_handler)

app.include_router(reviews_router)
app.include_router(listings_router)
