"""Filesystem scanner that turns a preset's glob patterns into file records.

The scanner only collects: it expands selection patterns, removes exclusions,
deduplicates, and stats what is left. Type, size and recency filtering happen later
in :mod:`ftree.record_filters`.
"""

import logging
import os
import stat
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from ftree.config.resolver import ResolvedPreset
from ftree.pattern_rules import GlobPatternRules
from ftree.scanner.file_record import FileRecord
from ftree.types import EntryKind, PathType

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


class Scanner:
    """Collects the filesystem entries selected by a resolved preset.

    Selection patterns are taken from the preset in order of precedence: explicit
    ``patterns``, then ``include``, then ``**/*.<ext>`` for each extension, then the
    catch-all ``**/*``. Exclusions always contain ``**/node_modules/**`` and
    ``**/.git/**`` on top of the preset's own. Excluded directories are not descended
    into.

    Each selection pattern is expanded on its own and the results are unioned, so a
    path matched by several patterns is still reported once. Metadata for the surviving
    paths is read concurrently; a path whose metadata cannot be read (permission denied,
    deleted mid-scan, broken symlink) is silently dropped.

    Symbolic links are reported with their target's metadata but are never descended into.

    Attributes:
        root_path (Path): Directory being scanned.
        preset (ResolvedPreset): Preset supplying patterns and the depth limit.
        max_workers (int): Upper bound on concurrent stat calls.

    Example:
        >>> scanner = Scanner("src", ResolvedPreset(extensions=("py",)))  # doctest: +SKIP
        >>> [record.path for record in scanner.scan()]  # doctest: +SKIP
        ['ftree/__init__.py', 'ftree/units.py']
    """

    def __init__(self, root_path: PathType, preset: ResolvedPreset, max_workers: int = DEFAULT_MAX_WORKERS) -> None:
        self.root_path = Path(root_path)
        self.preset = preset
        self.max_workers = max(1, max_workers)
        self.include_rules = [GlobPatternRules([pattern]) for pattern in preset.include_patterns]
        self.exclusion_rules = GlobPatternRules(preset.exclude_patterns, match_descendants=True)

    def scan(self) -> List[FileRecord]:
        """Scan the root directory.

        Returns:
            One record per selected, accessible path, ordered by relative path.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
        """
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        paths = self.candidate_paths()
        logger.debug("Selected %d candidate paths under %s", len(paths), self.root_path)

        if self.max_workers == 1 or len(paths) < 2:
            results = [self._read_record(path) for path in paths]
        else:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(self._read_record, paths))

        records = [record for record in results if record is not None]
        dropped = len(paths) - len(records)
        if dropped:
            logger.info("Skipped %d inaccessible paths", dropped)
        return sorted(records, key=lambda record: record.path)

    def candidate_paths(self) -> List[str]:
        """Expand every selection pattern and union the results.

        Returns:
            Unique relative paths, in walk order of their first match.
        """
        entries = list(self._walk())
        selected: Dict[str, None] = {}
        for rules in self.include_rules:
            for path in self._expand(rules, entries):
                selected.setdefault(path, None)
        return list(selected)

    def _expand(self, rules: GlobPatternRules, entries: List[str]) -> Iterator[str]:
        return (path for path in entries if rules.matches(path))

    def _walk(self) -> Iterator[str]:
        """Yield relative paths of all non-excluded entries within the depth limit."""
        max_depth = self.preset.depth
        stack = [("", 0)]
        while stack:
            relative_dir, depth = stack.pop()
            if max_depth is not None and depth >= max_depth:
                continue
            directory = self.root_path / relative_dir if relative_dir else self.root_path
            try:
                with os.scandir(directory) as it:
                    children = sorted(it, key=lambda entry: entry.name)
            except OSError as e:
                logger.debug("Cannot list %s: %s", directory, e)
                continue

            subdirectories = []
            for entry in children:
                relative_path = f"{relative_dir}/{entry.name}" if relative_dir else entry.name
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                if is_dir:
                    if self.exclusion_rules.matches_directory(relative_path):
                        continue
                    subdirectories.append(relative_path)
                elif self.exclusion_rules.matches(relative_path):
                    continue
                yield relative_path

            # Reversed so the stack pops subdirectories in name order
            for relative_path in reversed(subdirectories):
                stack.append((relative_path, depth + 1))

    def _read_record(self, relative_path: str) -> Optional[FileRecord]:
        try:
            stat_info = os.stat(self.root_path / relative_path)
        except OSError as e:
            logger.debug("Dropping %s: %s", relative_path, e)
            return None
        return FileRecord(
            path=relative_path,
            size=stat_info.st_size,
            modified_at=datetime.fromtimestamp(stat_info.st_mtime, tz=timezone.utc),
            kind=EntryKind.DIRECTORY if stat.S_ISDIR(stat_info.st_mode) else EntryKind.FILE,
        )


def scan(root_path: PathType, preset: ResolvedPreset, max_workers: int = DEFAULT_MAX_WORKERS) -> List[FileRecord]:
    """Scan ``root_path`` with the patterns of ``preset``. See :class:`Scanner`."""
    return Scanner(root_path, preset, max_workers=max_workers).scan()
