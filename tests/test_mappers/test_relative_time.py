from datetime import datetime, timedelta, timezone

import pytest

from reviewhub.mappers.relative_time import relative_time

NOW = datetime(2024, 6, 30, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(0), "today"),
        (timedelta(hours=5), "today"),
        (timedelta(days=1), "yesterday"),
        (timedelta(days=3), "3 days ago"),
        (timedelta(days=7), "a week ago"),
        (timedelta(days=20), "2 weeks ago"),
        (timedelta(days=28), "a month ago"),
        (timedelta(days=45), "a month ago"),
        (timedelta(days=90), "3 months ago"),
        (timedelta(days=364), "a year ago"),
        (timedelta(days=400), "a year ago"),
        (timedelta(days=800), "2 years ago"),
    ],
)
def test_buckets(delta, expected):
    assert relative_time(NOW - delta, NOW) == expected


def test_future_reads_today():
    assert relative_time(NOW + timedelta(days=2), NOW) == "today"


def test_naive_timestamp_is_utc():
    naive = datetime(2024, 6, 29, 12, 0)
    assert relative_time(naive, NOW) == "yesterday"
