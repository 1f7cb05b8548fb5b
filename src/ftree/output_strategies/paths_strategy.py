"""Flat path list output."""

from typing import Sequence

from ftree.scanner.file_record import FileRecord
from ftree.tree.tree_node import TreeNode

from .base_strategy import OutputStrategy, RenderOptions


class PathsOutputStrategy(OutputStrategy):
    """Lists one relative path per line, in the order of the filtered and sorted records.

    The tree is not used, so the preset's sort order is preserved exactly.
    """

    def render(self, tree: TreeNode, records: Sequence[FileRecord], options: RenderOptions = RenderOptions()) -> str:
        return "\n".join(record.path for record in records)
