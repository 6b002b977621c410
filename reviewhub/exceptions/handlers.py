import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import GooglePlacesError, HostawayError, RateLimitError, ReviewNotFoundError

logger = logging.getLogger(__name__)


async def hostaway_error_handler(_request: Request, exc: HostawayError) -> JSONResponse:
    logger.error("Hostaway error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Hostaway error: {exc.message}"},
    )


async def google_places_error_handler(_request: Request, exc: GooglePlacesError) -> JSONResponse:
    logger.error("Google Places error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Google Places error: {exc.message}"},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )


async def review_not_found_handler(_request: Request, exc: ReviewNotFoundError) -> JSONResponse:
    logger.warning("Review not found: %s", exc.review_id)
    return JSONResponse(
        status_code=404,
        content={"detail": "Review not found"},
    )
