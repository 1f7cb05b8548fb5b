"""Plain ASCII tree output."""

from ftree.tree.tree_node import TreeNode

from .base_strategy import HierarchicalOutputStrategy


class AsciiOutputStrategy(HierarchicalOutputStrategy):
    """Renders the tree using only ASCII characters, marking directories with ``[D]``.

    Example:
        >>> from datetime import datetime, timezone
        >>> from ftree.scanner.file_record import FileRecord
        >>> from ftree.tree.tree_builder import build_tree
        >>> from ftree.types import EntryKind
        >>> now = datetime.now(timezone.utc)
        >>> records = [
        ...     FileRecord("a.txt", 500, now, EntryKind.FILE),
        ...     FileRecord("sub/b.txt", 2000, now, EntryKind.FILE),
        ... ]
        >>> print(AsciiOutputStrategy().render(build_tree(records), records))
        +-- [D] sub
        |   \\-- b.txt
        \\-- a.txt
    """

    branch = "+-- "
    last_branch = "\\-- "
    guide = "|   "
    blank_guide = "    "

    def format_label(self, node: TreeNode) -> str:
        return f"[D] {node.name}" if node.is_dir else node.name
