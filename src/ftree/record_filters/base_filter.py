from abc import ABC, abstractmethod

from ftree.scanner.file_record import FileRecord


class BaseRecordFilter(ABC):
    """
    Abstract base class defining the interface for filters applied to scanned file records.

    Filters are pure predicates over a single FileRecord: they never touch the filesystem
    and hold no state that changes between calls, so they can be composed in any order
    and always select the same records.

    Example:
        >>> from datetime import datetime, timezone
        >>> from ftree.types import EntryKind
        >>> class HiddenFilter(BaseRecordFilter):
        ...     def exclude(self, record: FileRecord) -> bool:
        ...         return record.name.startswith(".")
        >>> record = FileRecord(".env", 10, datetime.now(timezone.utc), EntryKind.FILE)
        >>> HiddenFilter().exclude(record)
        True
    """

    @abstractmethod
    def exclude(self, record: FileRecord) -> bool:
        """
        Determine if a record should be dropped from the results.

        Args:
            record (FileRecord): The record to check.

        Returns:
            bool: True if the record should be dropped, False if it should be kept.
        """
        pass

    def has_rules(self) -> bool:
        """
        Check whether this filter can exclude anything at all.

        Returns:
            bool: True unless the filter is configured to keep every record.
        """
        return True
