"""Preset-driven filtered directory trees.

This package scans a directory with named filter presets (glob patterns, size,
recency and type filters), assembles the matches into a tree and renders it as
markdown, ASCII, JSON or a flat path list.
"""

from importlib.metadata import PackageNotFoundError, version

from ftree.config import Configuration, ResolvedPreset, list_presets, load_config, resolve_preset
from ftree.exceptions import ConfigurationError, PresetNotFoundError
from ftree.ftree import FilterTree, ScanResult, format_report, run_preset
from ftree.output_strategies import render
from ftree.record_filters import filter_and_sort
from ftree.scanner import FileRecord, scan
from ftree.tree import TreeNode, build_tree

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("ftree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "Configuration",
    "ConfigurationError",
    "FileRecord",
    "FilterTree",
    "PresetNotFoundError",
    "ResolvedPreset",
    "ScanResult",
    "TreeNode",
    "build_tree",
    "filter_and_sort",
    "format_report",
    "list_presets",
    "load_config",
    "render",
    "resolve_preset",
    "run_preset",
    "scan",
]
