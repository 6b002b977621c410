import asyncio
import logging
from datetime import datetime, timezone

from pydantic import BaseModel

from reviewhub.exceptions.custom import GooglePlacesError, HostawayError, RateLimitError
from reviewhub.mappers.slugs import find_best_matching_listing
from reviewhub.schemas.google_places import GoogleReviewsPayload
from reviewhub.schemas.hostaway import InternalReview
from reviewhub.schemas.reviews import CombinedReview, CombinedReviewsStats, ReviewStatus
from reviewhub.services.aggregator import aggregate
from reviewhub.services.google_places import GooglePlacesService
from reviewhub.services.hostaway import HostawayService
from reviewhub.services.review_store import ReviewStore

logger = logging.getLogger(__name__)

UNKNOWN_PROPERTY = "Unknown Property"


class CombinedReviews(BaseModel):
    reviews: list[CombinedReview]
    stats: CombinedReviewsStats
    property_name: str
    last_updated: datetime


class DashboardService:
    """Loads both review sources and hands them to the aggregator."""

    def __init__(
        self,
        store: ReviewStore,
        google_places: GooglePlacesService | None = None,
        hostaway: HostawayService | None = None,
    ):
        self._store = store
        self._google_places = google_places
        self._hostaway = hostaway

    @property
    def store(self) -> ReviewStore:
        return self._store

    @property
    def hostaway_enabled(self) -> bool:
        return self._hostaway is not None

    async def sync(self) -> int:
        """Pull reviews from Hostaway into the store."""
        if self._hostaway is None:
            raise HostawayError("Hostaway is not configured")
        reviews = await self._hostaway.get_reviews()
        synced = self._store.load(reviews)
        logger.info("Synced %d Hostaway reviews (store holds %d)", synced, self._store.count())
        return synced

    def resolve_listing(self, slug: str) -> str | None:
        return find_best_matching_listing(slug, self._store.listing_names())

    async def _load_internal(
        self,
        property_name: str | None,
        status: ReviewStatus | None,
    ) -> list[InternalReview]:
        return self._store.query(status=status, listing_name=property_name)

    async def _load_google(
        self,
        property_name: str | None,
        include_google: bool,
        language: str,
    ) -> GoogleReviewsPayload | None:
        if not include_google or not property_name or self._google_places is None:
            return None
        try:
            return await self._google_places.get_reviews(property_name, language=language)
        except (GooglePlacesError, RateLimitError) as exc:
            # the combined view still renders from internal reviews alone
            logger.warning("Google reviews unavailable for %s: %s", property_name, exc)
            return None

    async def google_reviews(self, property_name: str | None, language: str = "en") -> GoogleReviewsPayload:
        if self._google_places is None:
            raise GooglePlacesError("Google Places API key not configured")
        return await self._google_places.get_reviews(property_name, language=language)

    async def combined(
        self,
        property_name: str | None = None,
        include_google: bool = True,
        language: str = "en",
        status: ReviewStatus | None = ReviewStatus.published,
    ) -> CombinedReviews:
        """Internal and Google reviews for one property (or all internal ones).

        Both sources are fetched concurrently; a failed or disabled Google
        source contributes an empty list.
        """
        internal, google = await asyncio.gather(
            self._load_internal(property_name, status),
            self._load_google(property_name, include_google, language),
        )

        google_reviews = google.reviews if google else []
        result = aggregate(
            internal,
            google_reviews,
            google_total_reviews=google.total_reviews if google else None,
            property_name=property_name,
        )

        return CombinedReviews(
            reviews=result.reviews,
            stats=result.stats,
            property_name=(google.property_name if google else None) or property_name or UNKNOWN_PROPERTY,
            last_updated=datetime.now(timezone.utc),
        )
