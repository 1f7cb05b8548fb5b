"""Size-based filters for file records."""

from typing import Union

from ftree.scanner.file_record import FileRecord
from ftree.units import parse_size

from .base_filter import BaseRecordFilter


def _as_bytes(size: Union[str, int]) -> int:
    if isinstance(size, bool):
        raise ValueError(f"size must be string or int, got {type(size)}")
    if isinstance(size, str):
        return parse_size(size)
    if isinstance(size, int):
        if size < 0:
            raise ValueError("Size cannot be negative")
        return size
    raise ValueError(f"size must be string or int, got {type(size)}")


class MinSizeFilter(BaseRecordFilter):
    """Drops files smaller than a minimum size.

    Directory records are never dropped by size. Sizes given as strings are parsed
    leniently, so an unparseable string becomes a 0-byte threshold.

    Attributes:
        min_size_bytes (int): Smallest file size kept, in bytes.

    Example:
        >>> MinSizeFilter("1KB").min_size_bytes
        1024
    """

    def __init__(self, min_size: Union[str, int]):
        """Initialize the filter.

        Args:
            min_size: Human-readable size ('500KB') or a byte count.

        Raises:
            ValueError: If min_size is a negative integer or not a string or int.
        """
        self.min_size_bytes = _as_bytes(min_size)

    def exclude(self, record: FileRecord) -> bool:
        return not record.is_dir and record.size < self.min_size_bytes

    def has_rules(self) -> bool:
        return self.min_size_bytes > 0


class MaxSizeFilter(BaseRecordFilter):
    """Drops files larger than a maximum size.

    Directory records are never dropped by size.

    Attributes:
        max_size_bytes (int): Largest file size kept, in bytes.

    Example:
        >>> MaxSizeFilter("2.5MB").max_size_bytes
        2621440
    """

    def __init__(self, max_size: Union[str, int]):
        """Initialize the filter.

        Args:
            max_size: Human-readable size ('10MB') or a byte count.

        Raises:
            ValueError: If max_size is a negative integer or not a string or int.
        """
        self.max_size_bytes = _as_bytes(max_size)

    def exclude(self, record: FileRecord) -> bool:
        return not record.is_dir and record.size > self.max_size_bytes
