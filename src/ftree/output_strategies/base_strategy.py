"""Output strategy base class defining the interface for rendering scan results.

This module provides the abstract base class every output format implements, the
options shared by all formats, and the common machinery for the two hierarchical
(tree-drawing) formats.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterator, List, NamedTuple, Optional, Sequence

from ftree.scanner.file_record import FileRecord
from ftree.tree.tree_node import TreeNode
from ftree.units import format_relative_age, format_size


class RenderOptions(NamedTuple):
    """Options shared by every output format.

    Attributes:
        show_size: Append the human-readable size of files.
        show_date: Append how long ago files were modified.
        now: Reference time for relative ages. Defaults to the current time.
    """

    show_size: bool = False
    show_date: bool = False
    now: Optional[datetime] = None


class OutputStrategy(ABC):
    """Abstract base class defining the interface for output formatting strategies.

    This class implements the Strategy pattern for rendering scan results in different
    formats. Strategies receive both the assembled tree and the flat, already filtered
    and sorted record list; each uses whichever representation it needs.

    Example:
        >>> class CountStrategy(OutputStrategy):
        ...     def render(self, tree, records, options=RenderOptions()):
        ...         return f"{len(records)} entries"
        >>> CountStrategy().render(None, [])
        '0 entries'
    """

    @abstractmethod
    def render(self, tree: TreeNode, records: Sequence[FileRecord], options: RenderOptions = RenderOptions()) -> str:
        """Render scan results as text.

        Args:
            tree: Root of the tree built from ``records``.
            records: The filtered and sorted flat record list.
            options: Display options.

        Returns:
            The rendered text, without a trailing newline.
        """
        pass


class HierarchicalOutputStrategy(OutputStrategy):
    """Common rendering for the indented tree formats.

    The tree is walked depth-first in pre-order. At each level, children are shown
    directories first and then by name; this ordering is presentation only and ignores
    any sort applied to the records. Each line is prefixed with guides reflecting
    whether each ancestor was the last of its siblings. The root itself is not printed.

    Subclasses supply the connector and guide strings and the node label.
    """

    branch = "├── "
    last_branch = "└── "
    guide = "│   "
    blank_guide = "    "

    def render(self, tree: TreeNode, records: Sequence[FileRecord], options: RenderOptions = RenderOptions()) -> str:
        return "\n".join(self.stream_lines(tree, options))

    def stream_lines(self, tree: TreeNode, options: RenderOptions = RenderOptions()) -> Iterator[str]:
        """Generate the rendered tree one line at a time."""

        def write_children(node: TreeNode, prefix: str) -> Iterator[str]:
            children = sort_for_display(node.children)
            for i, child in enumerate(children):
                is_last = i == len(children) - 1
                connector = self.last_branch if is_last else self.branch
                yield f"{prefix}{connector}{self.format_label(child)}{format_metadata(child, options)}"
                if child.children:
                    yield from write_children(child, prefix + (self.blank_guide if is_last else self.guide))

        yield from write_children(tree, "")

    @abstractmethod
    def format_label(self, node: TreeNode) -> str:
        """Return the text shown for a node, without connectors or metadata."""
        pass


def sort_for_display(nodes: Sequence[TreeNode]) -> List[TreeNode]:
    """Order sibling nodes directories first, then by name."""
    return sorted(nodes, key=lambda node: (not node.is_dir, node.name.lower(), node.name))


def format_metadata(node: TreeNode, options: RenderOptions) -> str:
    """Return the parenthesized metadata suffix for a node, or an empty string."""
    parts = []
    if options.show_size and node.size is not None:
        parts.append(format_size(node.size))
    if options.show_date and node.modified_at is not None:
        parts.append(format_relative_age(node.modified_at, now=options.now))
    return f" ({', '.join(parts)})" if parts else ""
