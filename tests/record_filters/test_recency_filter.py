from datetime import datetime, timedelta, timezone

from ftree.record_filters.recency_filter import RecencyFilter
from ftree.types import EntryKind


def test_within(make_record, now):
    recency = RecencyFilter.within("7d", now=now)

    assert recency.cutoff == now - timedelta(days=7)
    assert not recency.exclude(make_record("new.txt", modified_at=now - timedelta(days=6)))
    assert recency.exclude(make_record("old.txt", modified_at=now - timedelta(days=8)))


def test_cutoff_is_inclusive(make_record, now):
    recency = RecencyFilter.within("1h", now=now)
    assert not recency.exclude(make_record("edge.txt", modified_at=now - timedelta(hours=1)))
    assert recency.exclude(make_record("edge.txt", modified_at=now - timedelta(hours=1, microseconds=1)))


def test_applies_to_directories(make_record, now):
    recency = RecencyFilter.within("1d", now=now)
    assert recency.exclude(make_record("sub", modified_at=now - timedelta(days=2), kind=EntryKind.DIRECTORY))


def test_unparseable_duration_keeps_only_the_present(make_record, now):
    recency = RecencyFilter.within("7y", now=now)

    assert recency.cutoff == now
    assert not recency.exclude(make_record("now.txt", modified_at=now))
    assert recency.exclude(make_record("earlier.txt", modified_at=now - timedelta(seconds=1)))


def test_absolute_cutoff(make_record):
    recency = RecencyFilter(datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert recency.exclude(make_record("old.txt", modified_at=datetime(2023, 12, 31, tzinfo=timezone.utc)))
    assert not recency.exclude(make_record("new.txt", modified_at=datetime(2024, 1, 2, tzinfo=timezone.utc)))


def test_naive_cutoff_is_utc():
    assert RecencyFilter(datetime(2024, 1, 1)).cutoff == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_within_defaults_to_current_time(make_record):
    recency = RecencyFilter.within("1h")
    assert not recency.exclude(make_record("fresh.txt", modified_at=datetime.now(timezone.utc)))
