"""Node representation for path segments in the result tree."""

from datetime import datetime
from typing import Dict, Optional

from anytree import Node

from ftree.types import EntryKind

ROOT_PATH = "."


class TreeNode(Node):  # type: ignore
    """Node representing one path segment of the scan results.

    Extends anytree.Node with the entry's relative path, kind and, for files, size and
    modification time. The relative path is stored as ``relative_path`` because anytree
    already uses ``path`` for the chain of nodes from the root.

    Each node keeps an index of its children by name so that lookups while building the
    tree don't rescan the children list; the index is maintained through anytree's
    attach/detach hooks.

    Attributes:
        name (str): Last path segment ('.' for the root).
        relative_path (str): Slash-separated path relative to the scan root ('.' for the root).
        kind (EntryKind): File or directory.
        size (Optional[int]): Size in bytes, files only.
        modified_at (Optional[datetime]): Modification time, files only.
        children (tuple[TreeNode]): Child nodes in insertion order (inherited from anytree.Node).

    Example:
        >>> root = TreeNode(".", relative_path=".", kind=EntryKind.DIRECTORY)
        >>> child = TreeNode("a.txt", relative_path="a.txt", kind=EntryKind.FILE, parent=root, size=500)
        >>> root.get_child("a.txt") is child
        True
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        relative_path: str,
        kind: EntryKind,
        parent: Optional["TreeNode"] = None,
        size: Optional[int] = None,
        modified_at: Optional[datetime] = None,
    ) -> None:
        self._children_by_name: Dict[str, "TreeNode"] = {}
        self.relative_path = relative_path
        self.kind = kind
        self.size = size
        self.modified_at = modified_at
        super().__init__(name, parent)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def get_child(self, name: str) -> Optional["TreeNode"]:
        """Return the child with the given name, or None."""
        return self._children_by_name.get(name)

    def _post_attach(self, parent: "TreeNode") -> None:
        parent._children_by_name[self.name] = self

    def _post_detach(self, parent: "TreeNode") -> None:
        parent._children_by_name.pop(self.name, None)
