"""Command-line argument parsing for ftree.

This module defines the command-line interface for ftree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import List, Optional

from ftree import __version__
from ftree.types import OutputFormat, SortKey, TypeFilter

QUICK_FILTER_OPTIONS = ("extensions", "patterns", "exclude", "type", "min_size", "max_size", "modified_within")
# Apply on top of a preset, or on their own to list the current directory
MODIFIER_OPTIONS = ("depth", "sort")


class SplitCommaAction(argparse.Action):
    """Append comma-separated values to a list, so both `--ext ts,js` and `--ext ts --ext js` work."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: object,
        option_string: Optional[str] = None,
    ) -> None:
        items: List[str] = list(getattr(namespace, self.dest, None) or [])
        items.extend(part.strip().lstrip(".") for part in str(values).split(",") if part.strip())
        setattr(namespace, self.dest, items)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with ftree's options.
    """
    description = """
    ftree: filtered directory trees driven by named presets.

    A preset (defined in ftree.yaml) selects files with glob patterns or extensions,
    filters them by type, size and modification time, sorts them, and prints the result
    as a tree (markdown or ASCII), as JSON, or as a flat list of paths.
    """

    epilog = """
    Examples:
      # Run the "source" preset from ./ftree.yaml over the current directory
      ftree source

      # Run a preset over another directory with an explicit config file
      ftree -c ~/ftree.yaml docs /path/to/project

      # List the presets and aliases a config defines
      ftree -l

      # Quick filters, no config needed
      ftree --ext ts,tsx /path/to/project
      ftree --modified-within 7d --show-date
      ftree --min-size 1MB --sort size-desc -f paths

      # Everything within two levels, largest first
      ftree --depth 2 --sort size-desc

      # Markdown report with counts, written to a file
      ftree --report -o tree.md source
    """

    parser = argparse.ArgumentParser(
        prog="ftree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"ftree {__version__}", help="Show the version and exit"
    )
    parser.add_argument("preset", nargs="?", help="Name of the preset or alias to run.")
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        help="The directory to scan (default: current directory). Output paths are relative to it.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="FILE",
        help="Configuration file (default: ftree.yaml in the scanned directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[output_format.value for output_format in OutputFormat],
        help="Output format (default: the preset's, else markdown).",
    )
    parser.add_argument(
        "--show-size",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show file sizes in tree output (default: the preset's setting).",
    )
    parser.add_argument(
        "--show-date",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show how long ago files were modified in tree output (default: the preset's setting).",
    )
    parser.add_argument(
        "-l",
        "--list",
        action="store_true",
        help="List the presets and aliases defined in the configuration and exit.",
    )
    parser.add_argument(
        "-r",
        "--report",
        action="store_true",
        help="Wrap the output in a markdown report with a heading and item counts.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v for info, -vv for debug).",
    )

    quick = parser.add_argument_group(
        "quick filters", "Run an ad-hoc filter instead of a preset. No configuration file is needed."
    )
    quick.add_argument(
        "--ext",
        dest="extensions",
        action=SplitCommaAction,
        metavar="EXT[,EXT...]",
        help="File extensions to include (can be specified multiple times).",
    )
    quick.add_argument(
        "--pattern",
        dest="patterns",
        action="append",
        metavar="GLOB",
        help="Glob pattern to include, e.g. '**/*.config.*' (can be specified multiple times).",
    )
    quick.add_argument(
        "--exclude",
        action="append",
        metavar="GLOB",
        help="Glob pattern to exclude (can be specified multiple times).",
    )
    quick.add_argument("--type", choices=[type_filter.value for type_filter in TypeFilter], help="Entry type to keep.")
    quick.add_argument("--min-size", metavar="SIZE", help="Minimum file size, e.g. 100KB.")
    quick.add_argument("--max-size", metavar="SIZE", help="Maximum file size, e.g. 10MB.")
    quick.add_argument(
        "--modified-within", metavar="DURATION", help="Only entries modified within this period, e.g. 6h, 7d, 2w, 1m."
    )
    modifiers = parser.add_argument_group(
        "modifiers",
        "Override a preset's settings, or refine quick filters. Given without a preset or quick filter,"
        " they list the whole current directory.",
    )
    modifiers.add_argument("--depth", type=int, metavar="N", help="Maximum directory depth to scan.")
    modifiers.add_argument(
        "--sort",
        choices=[sort_key.value for sort_key in SortKey],
        help="Sort order for the results.",
    )

    return parser


def is_quick_filter(args: argparse.Namespace) -> bool:
    """Check whether any quick filter option was given."""
    return any(getattr(args, option, None) for option in QUICK_FILTER_OPTIONS)


def has_modifier(args: argparse.Namespace) -> bool:
    """Check whether --depth or --sort was given."""
    return any(getattr(args, option, None) is not None for option in MODIFIER_OPTIONS)


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle. In quick filter
    mode a single positional argument is taken as the directory. --depth or --sort on
    their own, with no positional argument, list the current directory.

    Args:
        args: Parsed command-line arguments. Updated in place.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if is_quick_filter(args):
        if args.list:
            raise ValueError("--list cannot be combined with quick filter options")
        if args.preset is not None:
            if args.directory is not None:
                raise ValueError("a preset name cannot be combined with quick filter options")
            args.directory = Path(args.preset)
            args.preset = None
    elif args.preset is None and not args.list and not has_modifier(args):
        raise ValueError("a preset name or at least one quick filter option is required")
    elif args.list and args.preset is not None and args.directory is None:
        # `ftree -l some/dir` lists the presets of that directory's config
        args.directory = Path(args.preset)
        args.preset = None

    if args.depth is not None and args.depth < 0:
        raise ValueError("--depth must not be negative")

    if args.directory is None:
        args.directory = Path(".")
