"""Filtering records by modification time."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from ftree.scanner.file_record import FileRecord
from ftree.units import parse_duration

from .base_filter import BaseRecordFilter


class RecencyFilter(BaseRecordFilter):
    """Drops records last modified before a cutoff.

    Applies to files and directories alike.

    Attributes:
        cutoff (datetime): Oldest modification time kept.

    Example:
        >>> now = datetime(2024, 6, 1, tzinfo=timezone.utc)
        >>> RecencyFilter.within("7d", now=now).cutoff
        datetime.datetime(2024, 5, 25, 0, 0, tzinfo=datetime.timezone.utc)
    """

    def __init__(self, cutoff: datetime):
        if cutoff.tzinfo is None:
            cutoff = cutoff.replace(tzinfo=timezone.utc)
        self.cutoff = cutoff

    @classmethod
    def within(cls, duration: str, now: Optional[datetime] = None) -> "RecencyFilter":
        """Create a filter keeping records modified within ``duration`` of ``now``.

        The duration is parsed leniently; an unparseable duration yields a zero-length
        window, which keeps only records modified at or after ``now``.
        """
        if now is None:
            now = datetime.now(timezone.utc)
        return cls(now - timedelta(milliseconds=parse_duration(duration)))

    def exclude(self, record: FileRecord) -> bool:
        return record.modified_at < self.cutoff
