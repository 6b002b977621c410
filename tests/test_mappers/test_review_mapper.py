from datetime import datetime, timezone

from reviewhub.mappers.review_mapper import map_google_review, map_internal_review, map_review
from reviewhub.schemas.google_places import GoogleReview
from reviewhub.schemas.hostaway import InternalReview
from reviewhub.schemas.reviews import ReviewSource, ReviewStatus, ReviewType

UTC = timezone.utc
NOW = datetime(2024, 2, 4, 12, 0, tzinfo=UTC)


def _internal(**overrides) -> InternalReview:
    data = {
        "id": 42,
        "guest_name": "Maria Rodriguez",
        "listing_name": "29 Shoreditch Heights",
        "comment": "Great location and very clean apartment.",
        "overall_rating": 9,
        "type": ReviewType.guest_to_host,
        "status": ReviewStatus.pending,
        "submitted_at": datetime(2024, 2, 1, 15, 30, tzinfo=UTC),
        "categories": {"cleanliness": 9, "value": None},
    }
    data.update(overrides)
    return InternalReview(**data)


def _google(**overrides) -> GoogleReview:
    data = {
        "id": "google_1700000000_place-1_0",
        "author": "John Smith",
        "rating": 4,
        "text": "Fantastic property!",
        "created_at": datetime(2024, 1, 28, tzinfo=UTC),
        "relative_time": "a week ago",
        "property_name": "29 Shoreditch Heights",
    }
    data.update(overrides)
    return GoogleReview(**data)


def test_internal_mapping():
    review = map_internal_review(_internal(), NOW)

    assert review.id == "hostaway_42"
    assert review.source == ReviewSource.hostaway
    assert review.author == review.guest_name == "Maria Rodriguez"
    assert review.comment == review.text == "Great location and very clean apartment."
    assert review.listing_name == review.property_name == "29 Shoreditch Heights"
    assert review.rating == 9
    assert review.overall_rating == 9
    assert review.status == ReviewStatus.pending
    assert review.type == ReviewType.guest_to_host
    assert review.relative_time == "2 days ago"
    assert review.language == "en"
    assert review.translated is False
    assert review.categories == {"cleanliness": 9, "value": None}


def test_internal_unrated_propagates_none():
    review = map_internal_review(_internal(overall_rating=None), NOW)

    assert review.overall_rating is None
    assert review.rating is None


def test_google_mapping():
    review = map_google_review(_google())

    assert review.id == "google_1700000000_place-1_0"
    assert review.source == ReviewSource.google
    assert review.rating == 4
    assert review.overall_rating == 8
    assert review.type == ReviewType.guest_to_host
    assert review.status == ReviewStatus.published
    assert review.categories == {}
    assert review.language == "en"
    assert review.guest_name == "John Smith"
    assert review.comment == "Fantastic property!"
    assert review.listing_name == "29 Shoreditch Heights"
    assert review.relative_time == "a week ago"


def test_google_keeps_language():
    review = map_google_review(_google(language="fr"))

    assert review.language == "fr"
    assert review.original_language == "fr"


def test_google_property_name_override():
    review = map_google_review(_google(), property_name="Canary Wharf")

    assert review.listing_name == "Canary Wharf"
    assert review.property_name == "Canary Wharf"


def test_google_minimal_record_does_not_raise():
    minimal = GoogleReview(id="g1", rating=5, created_at=datetime(2024, 1, 1, tzinfo=UTC))

    review = map_google_review(minimal)

    assert review.overall_rating == 10
    assert review.author == ""
    assert review.relative_time is None


def test_map_review_dispatches_on_source():
    assert map_review(ReviewSource.google, _google()).source == ReviewSource.google
    assert map_review(ReviewSource.hostaway, _internal()).id == "hostaway_42"


def test_map_review_passes_context():
    internal = map_review(ReviewSource.hostaway, _internal(), now=NOW)
    google = map_review(ReviewSource.google, _google(), now=NOW, property_name="Canary Wharf")

    assert internal.relative_time == "2 days ago"
    assert google.listing_name == "Canary Wharf"
