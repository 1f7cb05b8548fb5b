"""Composite filter combining several record filters."""

from typing import List, Sequence

from ftree.scanner.file_record import FileRecord

from .base_filter import BaseRecordFilter


class CompositeRecordFilter(BaseRecordFilter):
    """Combines record filters: a record is dropped if ANY constituent filter drops it.

    Constituent filters are pure predicates, so the surviving set is the intersection
    of what each filter keeps and does not depend on their order. They are still
    evaluated in the order given, stopping at the first filter that drops the record.

    Attributes:
        filters (List[BaseRecordFilter]): Constituent filters.

    Example:
        >>> from ftree.record_filters.size_filters import MaxSizeFilter, MinSizeFilter
        >>> composite = CompositeRecordFilter([MinSizeFilter("1KB"), MaxSizeFilter("1MB")])
        >>> len(composite.filters)
        2
    """

    def __init__(self, filters: Sequence[BaseRecordFilter] = ()):
        """Initialize the composite.

        Args:
            filters: Filters to combine. May be empty, in which case nothing is dropped.

        Raises:
            TypeError: If any filter doesn't implement BaseRecordFilter.
        """
        for i, record_filter in enumerate(filters):
            if not isinstance(record_filter, BaseRecordFilter):
                raise TypeError(f"Filter at index {i} must implement BaseRecordFilter, got {type(record_filter)}")
        self.filters: List[BaseRecordFilter] = list(filters)

    def exclude(self, record: FileRecord) -> bool:
        return any(record_filter.exclude(record) for record_filter in self.filters)

    def has_rules(self) -> bool:
        return any(record_filter.has_rules() for record_filter in self.filters)

    def add_filter(self, record_filter: BaseRecordFilter) -> None:
        """Append another filter.

        Raises:
            TypeError: If record_filter doesn't implement BaseRecordFilter.
        """
        if not isinstance(record_filter, BaseRecordFilter):
            raise TypeError(f"Filter must implement BaseRecordFilter, got {type(record_filter)}")
        self.filters.append(record_filter)
