"""Filtering records by entry kind."""

from typing import Union

from ftree.scanner.file_record import FileRecord
from ftree.types import TypeFilter

from .base_filter import BaseRecordFilter


class TypeRecordFilter(BaseRecordFilter):
    """Keeps only records of one kind (file or directory).

    Attributes:
        type_filter (TypeFilter): The kind to keep. ANY keeps everything.

    Example:
        >>> from datetime import datetime, timezone
        >>> from ftree.types import EntryKind
        >>> only_files = TypeRecordFilter("file")
        >>> only_files.exclude(FileRecord("sub", 4096, datetime.now(timezone.utc), EntryKind.DIRECTORY))
        True
        >>> TypeRecordFilter(TypeFilter.ANY).has_rules()
        False
    """

    def __init__(self, type_filter: Union[str, TypeFilter]):
        """Initialize the type filter.

        Args:
            type_filter: 'file', 'directory' or 'any', or the matching TypeFilter member.

        Raises:
            ValueError: If type_filter is not a known value.
        """
        self.type_filter = TypeFilter(type_filter)

    def exclude(self, record: FileRecord) -> bool:
        if self.type_filter is TypeFilter.ANY:
            return False
        return record.kind.value != self.type_filter.value

    def has_rules(self) -> bool:
        return self.type_filter is not TypeFilter.ANY
