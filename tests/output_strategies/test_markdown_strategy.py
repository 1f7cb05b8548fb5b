from datetime import datetime, timezone

import pytest

from ftree.output_strategies import MarkdownOutputStrategy, RenderOptions
from ftree.scanner.file_record import FileRecord
from ftree.tree.tree_builder import build_tree
from ftree.types import EntryKind


@pytest.fixture
def strategy():
    return MarkdownOutputStrategy()


def test_render(strategy, tree, records):
    assert strategy.render(tree, records) == "├── 📁 sub\n│   └── 📄 b.txt\n└── 📄 a.txt"


def test_render_with_sizes(strategy, tree, records):
    output = strategy.render(tree, records, RenderOptions(show_size=True))
    assert output == "├── 📁 sub\n│   └── 📄 b.txt (2.0 KB)\n└── 📄 a.txt (500 B)"


def test_render_with_dates(strategy, tree, records, now):
    output = strategy.render(tree, records, RenderOptions(show_date=True, now=now))
    assert output == "├── 📁 sub\n│   └── 📄 b.txt (2h ago)\n└── 📄 a.txt (2h ago)"


def test_render_with_sizes_and_dates(strategy, tree, records, now):
    output = strategy.render(tree, records, RenderOptions(show_size=True, show_date=True, now=now))
    assert output.splitlines()[-1] == "└── 📄 a.txt (500 B, 2h ago)"


def test_guides_under_last_child(strategy):
    modified = datetime(2024, 1, 1, tzinfo=timezone.utc)
    records = [
        FileRecord("d1/f1", 1, modified, EntryKind.FILE),
        FileRecord("d2/f2", 1, modified, EntryKind.FILE),
        FileRecord("d2/inner/f3", 1, modified, EntryKind.FILE),
    ]
    expected = "\n".join(
        [
            "├── 📁 d1",
            "│   └── 📄 f1",
            "└── 📁 d2",
            "    ├── 📁 inner",
            "    │   └── 📄 f3",
            "    └── 📄 f2",
        ]
    )
    assert strategy.render(build_tree(records), records) == expected


def test_children_ordered_directories_first_then_name(strategy):
    modified = datetime(2024, 1, 1, tzinfo=timezone.utc)
    records = [
        FileRecord("b.txt", 1, modified, EntryKind.FILE),
        FileRecord("A.txt", 1, modified, EntryKind.FILE),
        FileRecord("zeta", 0, modified, EntryKind.DIRECTORY),
        FileRecord("Beta", 0, modified, EntryKind.DIRECTORY),
    ]
    lines = strategy.render(build_tree(records), records).splitlines()
    assert lines == ["├── 📁 Beta", "├── 📁 zeta", "├── 📄 A.txt", "└── 📄 b.txt"]


def test_directories_never_show_metadata(strategy):
    modified = datetime(2024, 1, 1, tzinfo=timezone.utc)
    records = [FileRecord("sub", 4096, modified, EntryKind.DIRECTORY)]
    assert strategy.render(build_tree(records), records, RenderOptions(show_size=True)) == "└── 📁 sub"


def test_empty_tree(strategy):
    assert strategy.render(build_tree([]), []) == ""


def test_stream_lines(strategy, tree):
    assert list(strategy.stream_lines(tree)) == ["├── 📁 sub", "│   └── 📄 b.txt", "└── 📄 a.txt"]
