"""Output strategies rendering scan results as markdown, ASCII, JSON or a path list."""

import logging
from datetime import datetime
from typing import Dict, Optional, Sequence, Type, Union

from ftree.scanner.file_record import FileRecord
from ftree.tree.tree_node import TreeNode
from ftree.types import OutputFormat

from .ascii_strategy import AsciiOutputStrategy
from .base_strategy import HierarchicalOutputStrategy, OutputStrategy, RenderOptions
from .json_strategy import JSONOutputStrategy
from .markdown_strategy import MarkdownOutputStrategy
from .paths_strategy import PathsOutputStrategy

logger = logging.getLogger(__name__)

STRATEGIES: Dict[str, Type[OutputStrategy]] = {
    OutputFormat.MARKDOWN.value: MarkdownOutputStrategy,
    OutputFormat.ASCII.value: AsciiOutputStrategy,
    OutputFormat.JSON.value: JSONOutputStrategy,
    OutputFormat.PATHS.value: PathsOutputStrategy,
}

DEFAULT_FORMAT = OutputFormat.MARKDOWN


def get_strategy(output_format: Union[str, OutputFormat, None]) -> OutputStrategy:
    """Return the strategy for an output format name.

    Names must match exactly. Unknown or missing names fall back to markdown.

    Example:
        >>> type(get_strategy("json")).__name__
        'JSONOutputStrategy'
        >>> type(get_strategy("yaml")).__name__
        'MarkdownOutputStrategy'
    """
    if isinstance(output_format, OutputFormat):
        output_format = output_format.value
    strategy_class = STRATEGIES.get(output_format) if output_format is not None else None
    if strategy_class is None:
        if output_format is not None:
            logger.info("Unknown output format '%s', using %s", output_format, DEFAULT_FORMAT.value)
        strategy_class = STRATEGIES[DEFAULT_FORMAT.value]
    return strategy_class()


def render(
    tree: TreeNode,
    records: Sequence[FileRecord],
    output_format: Union[str, OutputFormat, None] = DEFAULT_FORMAT,
    show_size: bool = False,
    show_date: bool = False,
    now: Optional[datetime] = None,
) -> str:
    """Render scan results in the requested format.

    Args:
        tree: Root of the tree built from ``records``.
        records: The filtered and sorted flat record list (used by the paths format).
        output_format: 'markdown', 'ascii', 'json' or 'paths'; anything else renders markdown.
        show_size: Append file sizes in the hierarchical formats.
        show_date: Append relative modification ages in the hierarchical formats.
        now: Reference time for relative ages.

    Returns:
        The rendered text.
    """
    options = RenderOptions(show_size=show_size, show_date=show_date, now=now)
    return get_strategy(output_format).render(tree, records, options)


__all__ = [
    "AsciiOutputStrategy",
    "HierarchicalOutputStrategy",
    "JSONOutputStrategy",
    "MarkdownOutputStrategy",
    "OutputStrategy",
    "PathsOutputStrategy",
    "RenderOptions",
    "get_strategy",
    "render",
]
