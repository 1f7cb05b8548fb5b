"""Preset-driven scan, filter, tree and render pipeline.

This module ties the stages together: a resolved preset drives the scanner, the
scanned records are filtered and sorted, assembled into a tree, and rendered.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, NamedTuple, Optional, Tuple, Union

from ftree.config.resolver import ResolvedPreset, resolve_preset
from ftree.config.schema import Configuration
from ftree.output_strategies import DEFAULT_FORMAT, render
from ftree.record_filters.sorting import filter_and_sort
from ftree.scanner.file_record import FileRecord
from ftree.scanner.scanner import DEFAULT_MAX_WORKERS, scan
from ftree.tree.tree_builder import build_tree, count_items
from ftree.tree.tree_node import TreeNode
from ftree.types import OutputFormat, PathType

logger = logging.getLogger(__name__)


class ScanResult(NamedTuple):
    """Everything one pipeline run produced.

    Attributes:
        preset: Name of the preset that was run.
        count: Number of records that survived filtering.
        tree: Root of the result tree.
        files: The filtered and sorted records.
        output: The rendered text.
    """

    preset: str
    count: int
    tree: TreeNode
    files: List[FileRecord]
    output: str


class FilterTree:
    """Runs one preset over one directory.

    The scan happens lazily on first access to the records, the tree or the counts,
    and is performed once; create a new instance to rescan.

    Attributes:
        directory (Path): Directory being scanned.
        preset (ResolvedPreset): Preset driving the run.

    Example:
        >>> from ftree.config.resolver import preset_from_options
        >>> run = FilterTree("docs", preset_from_options(extensions=["md"]))  # doctest: +SKIP
        >>> print(run.render())  # doctest: +SKIP
        ├── 📁 guides
        │   └── 📄 install.md
        └── 📄 index.md

    Raises:
        ValueError: If directory is not a directory.
    """

    def __init__(
        self,
        directory: PathType,
        preset: ResolvedPreset,
        *,
        now: Optional[datetime] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """Prepare a run.

        Args:
            directory: Directory to scan. Can be any path-like object.
            preset: The resolved preset.
            now: Reference time for recency filters and relative ages. Defaults to the
                time of each use.
            max_workers: Upper bound on concurrent stat calls during the scan.

        Raises:
            ValueError: If directory is not a directory.
        """
        self.directory = Path(directory)
        if not self.directory.is_dir():
            raise ValueError(f"'{directory}' is not a valid directory")
        self.preset = preset
        self.now = now
        self.max_workers = max_workers
        self._results: Optional[Tuple[List[FileRecord], TreeNode]] = None

    @property
    def records(self) -> List[FileRecord]:
        """The filtered and sorted records."""
        return self._run()[0]

    @property
    def tree(self) -> TreeNode:
        """Root of the tree built from the records."""
        return self._run()[1]

    @property
    def file_count(self) -> int:
        return sum(1 for record in self.records if not record.is_dir)

    @property
    def directory_count(self) -> int:
        """Number of directory records. Directories only implied by deeper paths are not counted."""
        return sum(1 for record in self.records if record.is_dir)

    def _run(self) -> Tuple[List[FileRecord], TreeNode]:
        if self._results is None:
            scanned = scan(self.directory, self.preset, max_workers=self.max_workers)
            records = filter_and_sort(scanned, self.preset, now=self.now)
            logger.info("Preset '%s': kept %d of %d scanned entries", self.preset.name, len(records), len(scanned))
            self._results = (records, build_tree(records))
        return self._results

    def render(
        self,
        output_format: Union[str, OutputFormat, None] = None,
        show_size: Optional[bool] = None,
        show_date: Optional[bool] = None,
    ) -> str:
        """Render the results.

        Arguments left as None fall back to the preset's settings, then to markdown
        without sizes or dates.
        """
        if output_format is None:
            output_format = self.preset.output or DEFAULT_FORMAT
        if show_size is None:
            show_size = bool(self.preset.show_size)
        if show_date is None:
            show_date = bool(self.preset.show_date)
        return render(self.tree, self.records, output_format, show_size=show_size, show_date=show_date, now=self.now)

    def result(
        self,
        output_format: Union[str, OutputFormat, None] = None,
        show_size: Optional[bool] = None,
        show_date: Optional[bool] = None,
    ) -> ScanResult:
        """Run the pipeline and package everything it produced."""
        output = self.render(output_format, show_size=show_size, show_date=show_date)
        return ScanResult(
            preset=self.preset.name, count=len(self.records), tree=self.tree, files=self.records, output=output
        )


def run_preset(
    directory: PathType,
    config: Configuration,
    preset_name: str,
    *,
    output_format: Union[str, OutputFormat, None] = None,
    show_size: Optional[bool] = None,
    show_date: Optional[bool] = None,
    now: Optional[datetime] = None,
) -> ScanResult:
    """Resolve a preset by name and run it over ``directory``.

    Raises:
        PresetNotFoundError: If the configuration has no such preset or alias.
        ValueError: If directory is not a directory.
    """
    preset = resolve_preset(config, preset_name)
    return FilterTree(directory, preset, now=now).result(
        output_format=output_format, show_size=show_size, show_date=show_date
    )


def format_report(result: ScanResult) -> str:
    """Wrap a rendered result in a markdown report with a heading and item counts.

    Example:
        >>> from ftree.tree.tree_builder import build_tree
        >>> result = ScanResult("docs", 0, build_tree([]), [], "")
        >>> print(format_report(result))
        ## 🌲 Filter: `docs` (0 files, 0 dirs)
        <BLANKLINE>
        ```
        <BLANKLINE>
        ```
        <BLANKLINE>
        > Generated by ftree
    """
    files, directories = count_items(result.tree)
    return (
        f"## 🌲 Filter: `{result.preset}` ({files} files, {directories} dirs)\n\n"
        f"```\n{result.output}\n```\n\n"
        "> Generated by ftree"
    )
