from datetime import datetime, timezone

from reviewhub.schemas.google_places import GoogleReview, PlaceReview

DEFAULT_PROPERTY_NAME = "Default Property"


def map_place_review(
    review: PlaceReview,
    place_id: str,
    index: int,
    property_name: str | None = None,
) -> GoogleReview:
    """Map one Place Details review to a GoogleReview.

    Google gives no review id, so one is built from the review timestamp,
    the place id and the review position.
    """
    return GoogleReview(
        id=f"google_{review.time}_{place_id}_{index}",
        author=review.author_name,
        author_photo=review.profile_photo_url,
        author_url=review.author_url,
        rating=review.rating,
        text=review.text,
        created_at=datetime.fromtimestamp(review.time, tz=timezone.utc),
        relative_time=review.relative_time_description,
        language=review.language,
        original_language=review.original_language,
        translated=review.translated,
        property_name=property_name or DEFAULT_PROPERTY_NAME,
    )
