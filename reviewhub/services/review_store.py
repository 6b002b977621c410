from __future__ import annotations

import logging

from reviewhub.exceptions.custom import ReviewNotFoundError
from reviewhub.schemas.hostaway import InternalReview
from reviewhub.schemas.reviews import ReviewStatus, ReviewType, SortOrder

logger = logging.getLogger(__name__)


class ReviewStore:
    """In-memory holder of internal reviews, keyed by review id."""

    def __init__(self, reviews: list[InternalReview] | None = None) -> None:
        self._reviews: dict[int, InternalReview] = {}
        if reviews:
            self.load(reviews)

    def load(self, reviews: list[InternalReview]) -> int:
        """Insert or replace reviews by id. Returns how many were loaded."""
        for review in reviews:
            self._reviews[review.id] = review
        return len(reviews)

    def query(
        self,
        type: ReviewType | None = None,
        status: ReviewStatus | None = None,
        listing_name: str | None = None,
        search_term: str | None = None,
        sort_order: SortOrder = SortOrder.desc,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[InternalReview]:
        """Reviews matching every given filter, ordered by submission date.

        `listing_name` and `search_term` are case-insensitive substring
        matches; the search covers guest, listing and comment.
        """
        listing = listing_name.lower() if listing_name else None
        term = search_term.lower() if search_term else None

        matches = []
        for review in self._reviews.values():
            if type is not None and review.type != type:
                continue
            if status is not None and review.status != status:
                continue
            if listing and listing not in review.listing_name.lower():
                continue
            if term and not any(
                term in field.lower()
                for field in (review.guest_name, review.listing_name, review.comment)
            ):
                continue
            matches.append(review)

        matches.sort(key=lambda r: r.submitted_at, reverse=sort_order == SortOrder.desc)
        end = None if limit is None else offset + limit
        return matches[offset:end]

    def get(self, review_id: int) -> InternalReview | None:
        return self._reviews.get(review_id)

    def update_status(self, review_id: int, status: ReviewStatus) -> InternalReview:
        review = self._reviews.get(review_id)
        if review is None:
            raise ReviewNotFoundError(review_id)
        updated = review.model_copy(update={"status": status})
        self._reviews[review_id] = updated
        logger.info("Review %s status: %s -> %s", review_id, review.status, status)
        return updated

    def delete(self, review_id: int) -> InternalReview:
        review = self._reviews.pop(review_id, None)
        if review is None:
            raise ReviewNotFoundError(review_id)
        logger.info("Review %s deleted", review_id)
        return review

    def listing_names(self) -> list[str]:
        return sorted({r.listing_name for r in self._reviews.values() if r.listing_name})

    def count(self) -> int:
        return len(self._reviews)
