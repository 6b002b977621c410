import logging
from datetime import datetime, timezone

import httpx

from reviewhub.exceptions.custom import GooglePlacesError, RateLimitError
from reviewhub.mappers.google_mapper import DEFAULT_PROPERTY_NAME, map_place_review
from reviewhub.schemas.google_places import GoogleReviewsPayload, PlaceDetailsResponse

logger = logging.getLogger(__name__)

DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"
DETAILS_FIELDS = "reviews,rating,user_ratings_total"

# British Museum, a stable place with plenty of reviews
FALLBACK_PLACE_ID = "ChIJB9OTMDIbdkgRp0JWbQGZsS8"


class GooglePlacesService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        place_ids: dict[str, str] | None = None,
        fallback_place_id: str = FALLBACK_PLACE_ID,
    ):
        self._client = client
        self._api_key = api_key
        self._place_ids = place_ids or {}
        self._fallback_place_id = fallback_place_id

    def resolve_place_id(self, property_name: str | None) -> str:
        if property_name and self._place_ids.get(property_name):
            return self._place_ids[property_name]
        return self._fallback_place_id

    async def get_reviews(self, property_name: str | None, language: str = "en") -> GoogleReviewsPayload:
        place_id = self.resolve_place_id(property_name)
        params = {
            "place_id": place_id,
            "fields": DETAILS_FIELDS,
            "language": language,
            "key": self._api_key,
        }

        resp = await self._client.get(DETAILS_URL, params=params)

        if resp.status_code == 429:
            raise RateLimitError("Google Places")
        if resp.status_code >= 400:
            raise GooglePlacesError(resp.text, status_code=resp.status_code)

        data = PlaceDetailsResponse(**resp.json())
        if data.status != "OK" or data.result is None:
            raise GooglePlacesError(data.error_message or data.status)

        name = property_name or DEFAULT_PROPERTY_NAME
        reviews = [
            map_place_review(review, place_id, index, name)
            for index, review in enumerate(data.result.reviews)
        ]
        logger.info("Fetched %d Google reviews for %s (place %s)", len(reviews), name, place_id)

        return GoogleReviewsPayload(
            reviews=reviews,
            average_rating=data.result.rating or 0.0,
            total_reviews=data.result.user_ratings_total or 0,
            property_name=name,
            place_id=place_id,
            last_updated=datetime.now(timezone.utc),
        )
