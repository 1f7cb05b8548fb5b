"""JSON output strategy serializing the full result tree."""

import json
from typing import Any, Dict, Sequence

from ftree.scanner.file_record import FileRecord
from ftree.tree.tree_node import TreeNode
from ftree.units import format_timestamp

from .base_strategy import OutputStrategy, RenderOptions


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that serializes the tree as nested JSON objects.

    Every node becomes an object of this shape, with absent attributes omitted:
    {
        "name": "b.txt",
        "path": "sub/b.txt",
        "type": "file",
        "size": 2000,                          # files only
        "modified": "2024-01-02T03:04:05.000Z", # files only
        "children": [...]                      # directories only
    }

    The root node is named and pathed ``"."``. Output is indented by two spaces.
    Display options do not affect this format; sizes and timestamps are always included.

    Example:
        >>> from ftree.tree.tree_node import TreeNode
        >>> from ftree.types import EntryKind
        >>> root = TreeNode(".", relative_path=".", kind=EntryKind.DIRECTORY)
        >>> JSONOutputStrategy().node_to_dict(root)
        {'name': '.', 'path': '.', 'type': 'directory', 'children': []}
    """

    def render(self, tree: TreeNode, records: Sequence[FileRecord], options: RenderOptions = RenderOptions()) -> str:
        return json.dumps(self.node_to_dict(tree), indent=2, ensure_ascii=False)

    def node_to_dict(self, node: TreeNode) -> Dict[str, Any]:
        """Convert a node and its descendants to plain data."""
        data: Dict[str, Any] = {"name": node.name, "path": node.relative_path, "type": node.kind.value}
        if node.size is not None:
            data["size"] = node.size
        if node.modified_at is not None:
            data["modified"] = format_timestamp(node.modified_at)
        if node.is_dir:
            data["children"] = [self.node_to_dict(child) for child in node.children]
        return data
