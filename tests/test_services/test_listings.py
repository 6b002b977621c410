from datetime import datetime, timezone

from reviewhub.mappers.review_mapper import map_internal_review
from reviewhub.services.listings import group_by_listing, group_by_type, summarize_listings


def test_group_by_listing(sample_reviews):
    groups = group_by_listing(sample_reviews)

    assert list(groups) == ["29 Shoreditch Heights", "1B Central London - Modern Flat"]
    assert [r.id for r in groups["29 Shoreditch Heights"]] == [7453, 7454]


def test_group_by_type(sample_reviews):
    groups = group_by_type(sample_reviews)

    assert [r.id for r in groups["host-to-guest"]] == [7453]
    assert [r.id for r in groups["guest-to-host"]] == [7454, 7455]


def test_summaries(sample_reviews):
    now = datetime(2024, 9, 1, tzinfo=timezone.utc)
    combined = [map_internal_review(r, now) for r in sample_reviews]

    summaries = summarize_listings(combined)

    assert [s.name for s in summaries] == ["29 Shoreditch Heights", "1B Central London - Modern Flat"]
    shoreditch = summaries[0]
    assert shoreditch.slug == "29-shoreditch-heights"
    assert shoreditch.review_count == 2
    assert shoreditch.average_rating == 9.0
    assert shoreditch.latest_review == datetime(2024, 8, 21, 22, 45, 14, tzinfo=timezone.utc)
    assert shoreditch.sample_review.startswith("Shane and family")
    assert summaries[1].average_rating == 6.0


def test_summaries_empty():
    assert summarize_listings([]) == []
