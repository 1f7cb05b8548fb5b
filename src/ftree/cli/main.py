"""Command-line interface for ftree.

This module provides the command-line interface for ftree. It resolves a preset from
the configuration file (or builds one from quick filter options), runs it over the
requested directory, and writes the rendered tree to stdout or a file.

Exit Codes:
    0: Successful completion
    1: Runtime or configuration error
    2: Command-line syntax error
    3: Preset not found
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (output closed early, e.g. piping to `head`)

Example:
    # Run a preset from ./ftree.yaml
    $ ftree source

    # Ad-hoc filter without a config file
    $ ftree --ext md,rst docs/
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from ftree.cli.argparser import create_parser, validate_args
from ftree.config import (
    Configuration,
    ResolvedPreset,
    default_config_file,
    list_presets,
    load_config,
    preset_from_options,
    resolve_preset,
)
from ftree.exceptions import PresetNotFoundError
from ftree.ftree import FilterTree, format_report

logger = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_PRESET_NOT_FOUND = 3
EXIT_INTERRUPTED = 130
EXIT_BROKEN_PIPE = 141


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr; WARNING by default, INFO with -v, DEBUG with -vv."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s", stream=sys.stderr)


def format_preset_list(config: Configuration) -> str:
    """List preset and alias names, each followed by its description when it has one."""
    lines: List[str] = []
    for name in list_presets(config):
        preset = config.presets.get(name) or config.aliases.get(name)
        description = preset.description if preset is not None else None
        lines.append(f"{name}  {description}" if description else name)
    return "\n".join(lines)


def build_preset(args: argparse.Namespace) -> ResolvedPreset:
    """Build the quick filter preset described by the command-line options."""
    return preset_from_options(
        patterns=args.patterns or (),
        extensions=args.extensions or (),
        exclude=args.exclude or (),
        type_filter=args.type,
        min_size=args.min_size,
        max_size=args.max_size,
        modified_within=args.modified_within,
        depth=args.depth,
        sort_by=args.sort,
    )


def load_preset(args: argparse.Namespace) -> ResolvedPreset:
    """Resolve the named preset from the configuration, applying --depth and --sort on top.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ConfigurationError: If the configuration file is invalid.
        PresetNotFoundError: If the configuration has no such preset or alias.
    """
    config_file = args.config if args.config else default_config_file(args.directory)
    preset = resolve_preset(load_config(config_file), args.preset)
    if args.depth is not None:
        preset = preset._replace(depth=args.depth)
    if args.sort is not None:
        preset = preset._replace(sort_by=args.sort)
    return preset


def write_output(text: str, output_file: Optional[Path]) -> None:
    """Write text, newline-terminated, to the output file or to stdout."""
    if text and not text.endswith("\n"):
        text += "\n"
    if output_file is not None:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(text)
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the ftree command-line interface.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args(argv)

    try:
        # Perform additional validation beyond what argparse supports directly
        validate_args(args)
    except ValueError as e:
        parser.print_usage(sys.stderr)
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_USAGE)

    configure_logging(args.verbose)

    try:
        if not args.directory.is_dir():
            raise NotADirectoryError(f"'{args.directory}' is not a valid directory")

        if args.list:
            config_file = args.config if args.config else default_config_file(args.directory)
            write_output(format_preset_list(load_config(config_file)), args.output)
            return

        preset = load_preset(args) if args.preset is not None else build_preset(args)
        logger.info("Running preset '%s' over %s", preset.name, args.directory)

        run = FilterTree(args.directory, preset)
        if args.report:
            text = format_report(run.result(args.format, show_size=args.show_size, show_date=args.show_date))
        else:
            text = run.render(args.format, show_size=args.show_size, show_date=args.show_date)
        write_output(text, args.output)

    except PresetNotFoundError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_PRESET_NOT_FOUND)
    except BrokenPipeError:
        # Keep the interpreter from reporting the closed pipe again while flushing at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(EXIT_BROKEN_PIPE)
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
