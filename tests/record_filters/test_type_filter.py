import pytest

from ftree.record_filters.type_filter import TypeRecordFilter
from ftree.types import EntryKind, TypeFilter


@pytest.mark.parametrize(
    "type_filter,kind,excluded",
    [
        ("file", EntryKind.FILE, False),
        ("file", EntryKind.DIRECTORY, True),
        ("directory", EntryKind.FILE, True),
        ("directory", EntryKind.DIRECTORY, False),
        (TypeFilter.ANY, EntryKind.FILE, False),
        (TypeFilter.ANY, EntryKind.DIRECTORY, False),
    ],
)
def test_type_filter(make_record, type_filter, kind, excluded):
    assert TypeRecordFilter(type_filter).exclude(make_record("entry", kind=kind)) is excluded


def test_has_rules():
    assert TypeRecordFilter(TypeFilter.FILE).has_rules()
    assert TypeRecordFilter("directory").has_rules()
    assert not TypeRecordFilter("any").has_rules()


def test_unknown_type():
    with pytest.raises(ValueError):
        TypeRecordFilter("symlink")
