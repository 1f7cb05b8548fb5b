"""Applying a preset's filters to scanned records and ordering the survivors."""

import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from ftree.config.resolver import ResolvedPreset
from ftree.scanner.file_record import FileRecord
from ftree.types import SortKey, TypeFilter

from .base_filter import BaseRecordFilter
from .composite_filter import CompositeRecordFilter
from .recency_filter import RecencyFilter
from .size_filters import MaxSizeFilter, MinSizeFilter
from .type_filter import TypeRecordFilter

logger = logging.getLogger(__name__)

# Sort key -> (key function, descending)
_SORT_ORDERS: Dict[SortKey, Tuple[Callable[[FileRecord], object], bool]] = {
    SortKey.NAME: (lambda record: record.path, False),
    SortKey.SIZE_ASC: (lambda record: record.size, False),
    SortKey.SIZE_DESC: (lambda record: record.size, True),
    SortKey.DATE_ASC: (lambda record: record.modified_at, False),
    SortKey.DATE_DESC: (lambda record: record.modified_at, True),
}


def build_filters(preset: ResolvedPreset, now: Optional[datetime] = None) -> CompositeRecordFilter:
    """Create the filters a preset asks for, in the order type, min size, max size, recency.

    A threshold applies whenever the preset sets it, including when its text parses to 0.
    Filters that would keep every record (a 0-byte minimum) are left out.

    Args:
        preset: The resolved preset.
        now: Reference time for ``modified_within``. Defaults to the current time.
    """
    requested: List[BaseRecordFilter] = []
    if preset.type_filter is not TypeFilter.ANY:
        requested.append(TypeRecordFilter(preset.type_filter))
    if preset.min_size:
        requested.append(MinSizeFilter(preset.min_size))
    if preset.max_size:
        requested.append(MaxSizeFilter(preset.max_size))
    if preset.modified_within:
        requested.append(RecencyFilter.within(preset.modified_within, now=now))
    if preset.modified_after is not None:
        requested.append(RecencyFilter(preset.modified_after))

    composite = CompositeRecordFilter()
    for record_filter in requested:
        if record_filter.has_rules():
            composite.add_filter(record_filter)
        else:
            logger.debug("Skipping %s, it keeps every record", type(record_filter).__name__)
    return composite


def filter_records(
    records: Iterable[FileRecord], preset: ResolvedPreset, now: Optional[datetime] = None
) -> List[FileRecord]:
    """Return the records that pass every filter of ``preset``, in their original order."""
    composite = build_filters(preset, now=now)
    if not composite.has_rules():
        return list(records)
    return [record for record in records if not composite.exclude(record)]


def sort_records(records: Iterable[FileRecord], sort_key: Union[str, SortKey, None]) -> List[FileRecord]:
    """Order records by one of the sort keys.

    Ties keep relative-path order, so the result is the same for the same input no
    matter what order the records arrive in. Without a sort key, records are returned
    in their given order.

    Raises:
        ValueError: If sort_key is not a known value.

    Example:
        >>> from datetime import datetime, timezone
        >>> from ftree.types import EntryKind
        >>> now = datetime.now(timezone.utc)
        >>> records = [
        ...     FileRecord("a.txt", 500, now, EntryKind.FILE),
        ...     FileRecord("sub/b.txt", 2000, now, EntryKind.FILE),
        ... ]
        >>> [record.path for record in sort_records(records, "size-desc")]
        ['sub/b.txt', 'a.txt']
    """
    records = list(records)
    if sort_key is None:
        return records
    key, descending = _SORT_ORDERS[SortKey(sort_key)]
    by_path = sorted(records, key=lambda record: record.path)
    # sorted() is stable, including with reverse=True
    return sorted(by_path, key=key, reverse=descending)  # type: ignore[arg-type]


def filter_and_sort(
    records: Iterable[FileRecord], preset: ResolvedPreset, now: Optional[datetime] = None
) -> List[FileRecord]:
    """Apply the preset's filters, then its sort order.

    Args:
        records: Records produced by the scanner.
        preset: The resolved preset.
        now: Reference time for recency filtering. Defaults to the current time.

    Returns:
        The surviving records, ordered.
    """
    records = list(records)
    kept = filter_records(records, preset, now=now)
    logger.debug("Filters kept %d of %d records", len(kept), len(records))
    return sort_records(kept, preset.sort_by)
