"""Markdown-friendly tree output with box-drawing connectors and icons."""

from ftree.tree.tree_node import TreeNode

from .base_strategy import HierarchicalOutputStrategy


class MarkdownOutputStrategy(HierarchicalOutputStrategy):
    """Renders the tree with box-drawing connectors and folder/file icons.

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
        >>> print(MarkdownOutputStrategy().render(build_tree(records), records))
        ├── 📁 sub
        │   └── 📄 b.txt
        └── 📄 a.txt
    """

    def format_label(self, node: TreeNode) -> str:
        icon = "📁" if node.is_dir else "📄"
        return f"{icon} {node.name}"
