import logging
import time

import httpx

from reviewhub.exceptions.custom import HostawayError, RateLimitError
from reviewhub.mappers.hostaway_mapper import normalize_hostaway_review
from reviewhub.schemas.hostaway import HostawayReviewsResponse, HostawayTokenResponse, InternalReview

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.hostaway.com/v1"

# refresh the token this many seconds before Hostaway expires it
TOKEN_EXPIRY_MARGIN = 5 * 60


class HostawayService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        client_id: str,
        client_secret: str,
        base_url: str = DEFAULT_BASE_URL,
    ):
        self._client = client
        self._client_id = client_id
        self._client_secret = client_secret
        self._base_url = base_url.rstrip("/")
        self._token: str | None = None
        self._token_expires_at = 0.0

    def _token_valid(self) -> bool:
        return self._token is not None and time.monotonic() < self._token_expires_at

    async def get_access_token(self) -> str:
        if self._token_valid():
            return self._token

        data = {
            "grant_type": "client_credentials",
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "scope": "general",
        }
        resp = await self._client.post(
            f"{self._base_url}/accessTokens",
            data=data,
            headers={"Cache-Control": "no-cache"},
        )

        if resp.status_code == 429:
            raise RateLimitError("Hostaway")
        if resp.status_code >= 400:
            raise HostawayError(f"Failed to get access token: {resp.text}", status_code=resp.status_code)

        token = HostawayTokenResponse(**resp.json())
        self._token = token.access_token
        self._token_expires_at = time.monotonic() + token.expires_in - TOKEN_EXPIRY_MARGIN
        logger.info("Obtained Hostaway access token (expires in %ss)", token.expires_in)
        return self._token

    async def _get(self, path: str, params: dict[str, str] | None = None) -> httpx.Response:
        token = await self.get_access_token()
        resp = await self._client.get(
            f"{self._base_url}{path}",
            params=params,
            headers={"Authorization": f"Bearer {token}"},
        )

        if resp.status_code == 403:
            # token may have been revoked early; retry once with a fresh one
            logger.info("Hostaway returned 403, refreshing token")
            self._token = None
            token = await self.get_access_token()
            resp = await self._client.get(
                f"{self._base_url}{path}",
                params=params,
                headers={"Authorization": f"Bearer {token}"},
            )

        if resp.status_code == 429:
            raise RateLimitError("Hostaway")
        if resp.status_code >= 400:
            raise HostawayError(resp.text, status_code=resp.status_code)
        return resp

    async def get_reviews(
        self,
        listing_id: int | None = None,
        type: str | None = None,
        status: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[InternalReview]:
        params: dict[str, str] = {}
        if listing_id is not None:
            params["listingId"] = str(listing_id)
        if type:
            params["type"] = type
        if status:
            params["status"] = status
        if limit is not None:
            params["limit"] = str(limit)
        if offset is not None:
            params["offset"] = str(offset)

        resp = await self._get("/reviews", params=params)
        data = HostawayReviewsResponse(**resp.json())
        if data.status != "success":
            raise HostawayError(data.message or f"Unexpected status: {data.status}")

        normalized = (normalize_hostaway_review(r) for r in data.result)
        reviews = [r for r in normalized if r is not None]
        logger.info("Fetched %d Hostaway reviews", len(reviews))
        return reviews
