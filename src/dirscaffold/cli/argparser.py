"""Command-line argument parsing for dirscaffold.

This module defines the command-line interface for dirscaffold,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path

from dirscaffold import __version__
from dirscaffold.walker import WalkOptions


def positive_int(value: str) -> int:
    """argparse type for the -L depth limit.

    Raises:
        argparse.ArgumentTypeError: If the value is not an integer >= 1.
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid level {value!r}: must be a positive integer")
    if number < 1:
        raise argparse.ArgumentTypeError(f"invalid level {value!r}: must be a positive integer")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirscaffold's options.
    """
    description = """
    dirscaffold: print a deterministic ASCII tree of a directory.

    The output is byte-identical across runs over an unchanged filesystem:
    entries are sorted by name in codepoint order, symbolic links are shown
    as leaves and never followed, and directories that cannot be read are
    annotated inline instead of aborting the run.
    """

    epilog = """
    Examples:
      # Current directory
      dirscaffold

      # Two levels deep, directories before files
      dirscaffold -L 2 --dirsfirst /path/to/project

      # Ignore entries by name (pipe-separated glob patterns)
      dirscaffold -I "node_modules|.git|*.log" /path/to/project

      # Directories only, written to a file
      dirscaffold -d -o tree.txt /path/to/project

      # Display version information and exit
      dirscaffold -V
    """

    parser = argparse.ArgumentParser(
        prog="dirscaffold",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirscaffold {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="The directory to print. It is shown exactly as given on the first line (default: .).",
    )
    parser.add_argument(
        "-L",
        "--level",
        type=positive_int,
        metavar="LEVEL",
        help="Descend at most LEVEL directories below the root.",
    )
    parser.add_argument(
        "-I",
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help=(
            "Do not list entries whose name matches PATTERN. Only '*' and '?' are wildcards; every other "
            "character matches itself. Patterns are matched against bare names and several can be joined "
            "with '|'. A trailing '/' matches directories only. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Show hidden entries (the default; accepted for compatibility).",
    )
    parser.add_argument(
        "-d",
        "--dirs-only",
        action="store_true",
        help="List directories only.",
    )
    parser.add_argument(
        "--dirsfirst",
        action="store_true",
        help="List directories before files.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"--output must be a file, not a directory: {args.output}")


def build_walk_options(args: argparse.Namespace) -> WalkOptions:
    """Translate parsed arguments into traversal options."""
    return WalkOptions(
        max_depth=args.level,
        exclude_patterns=args.ignore,
        directories_only=args.dirs_only,
        dirs_first=args.dirsfirst,
        show_hidden=True,
    )
