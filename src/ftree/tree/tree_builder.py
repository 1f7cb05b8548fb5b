"""Assembly of a flat list of file records into a path hierarchy."""

import re
from typing import Iterable, List, Tuple

from anytree import PreOrderIter

from ftree.scanner.file_record import FileRecord
from ftree.types import EntryKind

from .tree_node import ROOT_PATH, TreeNode

_SEPARATORS = re.compile(r"[/\\]")


def build_tree(records: Iterable[FileRecord]) -> TreeNode:
    """Build a tree whose structure mirrors the records' paths.

    Records are inserted directories first, then by path, which keeps the children order
    deterministic; the shape of the tree does not depend on it. Directories that appear
    only as ancestors of a record are created on the way down. Inserting a path that
    already has a node updates that node instead of adding a second one.

    Args:
        records: Records to insert, in any order.

    Returns:
        The root node, a directory named and pathed '.'.

    Example:
        >>> from datetime import datetime, timezone
        >>> now = datetime.now(timezone.utc)
        >>> root = build_tree([
        ...     FileRecord("a.txt", 500, now, EntryKind.FILE),
        ...     FileRecord("sub/b.txt", 2000, now, EntryKind.FILE),
        ... ])
        >>> [node.relative_path for node in flatten_tree(root)]
        ['a.txt', 'sub', 'sub/b.txt']
    """
    root = TreeNode(ROOT_PATH, relative_path=ROOT_PATH, kind=EntryKind.DIRECTORY)

    ordered = sorted(records, key=lambda record: (not record.is_dir, record.path))
    for record in ordered:
        parts = [part for part in _SEPARATORS.split(record.path) if part and part != "."]
        if not parts:
            continue

        current = root
        for i, part in enumerate(parts):
            child = current.get_child(part)
            if child is None:
                child = TreeNode(
                    part, relative_path="/".join(parts[: i + 1]), kind=EntryKind.DIRECTORY, parent=current
                )
            current = child

        current.kind = record.kind
        if record.is_dir:
            current.size = None
            current.modified_at = None
        else:
            current.size = record.size
            current.modified_at = record.modified_at

    return root


def flatten_tree(root: TreeNode) -> List[TreeNode]:
    """Return every node below ``root`` in depth-first pre-order."""
    return [node for node in PreOrderIter(root) if node is not root]


def count_items(root: TreeNode) -> Tuple[int, int]:
    """Count the files and directories below ``root``.

    Returns:
        A ``(files, directories)`` pair; the root itself is not counted.
    """
    files = directories = 0
    for node in flatten_tree(root):
        if node.is_dir:
            directories += 1
        else:
            files += 1
    return files, directories
