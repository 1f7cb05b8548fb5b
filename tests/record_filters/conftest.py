from datetime import datetime, timezone

import pytest

from ftree.scanner.file_record import FileRecord
from ftree.types import EntryKind

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_record():
    """Build FileRecords with sensible defaults."""

    def _make_record(path, size=0, modified_at=NOW, kind=EntryKind.FILE):
        return FileRecord(path=path, size=size, modified_at=modified_at, kind=kind)

    return _make_record
