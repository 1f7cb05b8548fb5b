"""Immutable record describing one scanned filesystem entry."""

from datetime import datetime
from typing import NamedTuple

from ftree.types import EntryKind


class FileRecord(NamedTuple):
    """One filesystem entry found by a scan.

    Attributes:
        path (str): Path relative to the scan root, always slash-separated.
        size (int): Size in bytes as reported by stat.
        modified_at (datetime): Modification time, timezone-aware UTC.
        kind (EntryKind): Whether the entry is a file or a directory.

    Example:
        >>> from datetime import timezone
        >>> record = FileRecord("sub/b.txt", 2000, datetime(2024, 1, 1, tzinfo=timezone.utc), EntryKind.FILE)
        >>> record.name
        'b.txt'
        >>> record.is_dir
        False
    """

    path: str
    size: int
    modified_at: datetime
    kind: EntryKind

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
