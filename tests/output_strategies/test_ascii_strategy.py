from datetime import datetime, timezone

from ftree.output_strategies import AsciiOutputStrategy, RenderOptions
from ftree.scanner.file_record import FileRecord
from ftree.tree.tree_builder import build_tree
from ftree.types import EntryKind


def test_render(tree, records):
    assert AsciiOutputStrategy().render(tree, records) == "+-- [D] sub\n|   \\-- b.txt\n\\-- a.txt"


def test_render_with_sizes(tree, records):
    output = AsciiOutputStrategy().render(tree, records, RenderOptions(show_size=True))
    assert output == "+-- [D] sub\n|   \\-- b.txt (2.0 KB)\n\\-- a.txt (500 B)"


def test_output_is_plain_ascii():
    modified = datetime(2024, 1, 1, tzinfo=timezone.utc)
    records = [
        FileRecord("d1/f1", 1, modified, EntryKind.FILE),
        FileRecord("d2/inner/f3", 1, modified, EntryKind.FILE),
    ]
    output = AsciiOutputStrategy().render(build_tree(records), records)

    assert output.isascii()
    assert output.splitlines() == [
        "+-- [D] d1",
        "|   \\-- f1",
        "\\-- [D] d2",
        "    \\-- [D] inner",
        "        \\-- f3",
    ]
