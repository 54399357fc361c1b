"""Command-line interface for dirscaffold.

This module is thin glue around the core: it parses arguments, validates the
root path, builds the tree, and writes the rendered text to stdout or a file.

Exit Codes:
    0: Successful completion (including trees with unreadable subdirectories)
    1: Runtime error: the root cannot be read, or a pattern is malformed
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Print the current directory
    $ dirscaffold

    # Two levels, ignoring build output
    $ dirscaffold -L 2 -I "build|dist" /path/to/project
"""

import sys
from pathlib import Path
from typing import Optional, Sequence

from dirscaffold.cli.argparser import build_walk_options, create_parser, validate_args
from dirscaffold.cli.safe_writer import SafeWriter
from dirscaffold.cli.signal_handler import setup_signal_handling, signal_handler
from dirscaffold.renderer import render
from dirscaffold.types import PathType
from dirscaffold.walker import build_tree


def non_directory_name(root: PathType) -> Optional[str]:
    """Return the name to print for an existing root that is not a directory.

    Returns:
        The final path component, or None if the root is a directory or does not
        exist (both are handled by the walker).
    """
    path = Path(root)
    if path.exists() and not path.is_dir():
        return path.name or str(path)
    return None


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dirscaffold command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    setup_signal_handling()
    try:
        _run(argv)
    finally:
        signal_handler.restore()

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


def _run(argv: Optional[Sequence[str]]) -> None:
    try:
        parser = create_parser()
        args = parser.parse_args(argv)
        validate_args(args)
        options = build_walk_options(args)

        root: str = args.directory
        file_name = non_directory_name(root)
        tree = build_tree(root, options) if file_name is None else None

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            try:
                if tree is None:
                    safe_writer.write(f"{file_name}\n")
                else:
                    render(tree, safe_writer)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
