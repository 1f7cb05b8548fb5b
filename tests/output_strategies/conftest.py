from datetime import datetime, timedelta, timezone

import pytest

from ftree.scanner.file_record import FileRecord
from ftree.tree.tree_builder import build_tree
from ftree.types import EntryKind

MODIFIED = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return MODIFIED + timedelta(hours=2)


@pytest.fixture
def records():
    """The filtered, size-descending result of a file-only preset."""
    return [
        FileRecord("sub/b.txt", 2000, MODIFIED, EntryKind.FILE),
        FileRecord("a.txt", 500, MODIFIED, EntryKind.FILE),
    ]


@pytest.fixture
def tree(records):
    return build_tree(records)
