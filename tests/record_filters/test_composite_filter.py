import pytest

from ftree.record_filters.base_filter import BaseRecordFilter
from ftree.record_filters.composite_filter import CompositeRecordFilter
from ftree.record_filters.size_filters import MaxSizeFilter, MinSizeFilter
from ftree.record_filters.type_filter import TypeRecordFilter
from ftree.types import EntryKind


class MockFilter(BaseRecordFilter):
    def __init__(self, excluded_paths):
        self.excluded_paths = set(excluded_paths)
        self.calls = 0

    def exclude(self, record):
        self.calls += 1
        return record.path in self.excluded_paths


def test_empty_composite(make_record):
    composite = CompositeRecordFilter()

    assert not composite.has_rules()
    assert composite.filters == []
    assert not composite.exclude(make_record("a.txt"))


def test_any_filter_excludes(make_record):
    composite = CompositeRecordFilter([MockFilter(["a.txt"]), MockFilter(["b.txt"])])

    assert composite.exclude(make_record("a.txt"))
    assert composite.exclude(make_record("b.txt"))
    assert not composite.exclude(make_record("c.txt"))


def test_evaluation_stops_at_first_exclusion(make_record):
    first, second = MockFilter(["a.txt"]), MockFilter([])
    composite = CompositeRecordFilter([first, second])

    assert composite.exclude(make_record("a.txt"))
    assert first.calls == 1
    assert second.calls == 0


def test_filter_order_does_not_change_result(make_record):
    filters = [TypeRecordFilter("file"), MinSizeFilter("1KB"), MaxSizeFilter("1MB")]
    records = [
        make_record("small.txt", size=10),
        make_record("medium.txt", size=4096),
        make_record("huge.bin", size=10 * 1024 * 1024),
        make_record("sub", size=4096, kind=EntryKind.DIRECTORY),
    ]

    forward = CompositeRecordFilter(filters)
    backward = CompositeRecordFilter(list(reversed(filters)))

    assert [r.path for r in records if not forward.exclude(r)] == ["medium.txt"]
    assert [r.path for r in records if not backward.exclude(r)] == ["medium.txt"]


def test_add_filter():
    composite = CompositeRecordFilter()
    composite.add_filter(TypeRecordFilter("file"))

    assert len(composite.filters) == 1
    assert composite.has_rules()


def test_has_rules_ignores_inert_filters():
    assert not CompositeRecordFilter([TypeRecordFilter("any"), MinSizeFilter(0)]).has_rules()


def test_invalid_filters():
    with pytest.raises(TypeError, match="index 1"):
        CompositeRecordFilter([TypeRecordFilter("file"), "not a filter"])

    with pytest.raises(TypeError):
        CompositeRecordFilter().add_filter(object())
