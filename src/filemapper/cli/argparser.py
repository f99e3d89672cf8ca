"""Command-line argument parsing for filemapper.

This module defines the command-line interface for filemapper,
handling argument parsing and validation.
"""

import argparse
import logging
from pathlib import Path

from filemapper import __version__
from filemapper.config import MapperConfig

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with filemapper's options.
    """
    description = """
    filemapper: map a project's tree and file contents into a single text.

    The directory is walked depth-first. Hidden entries (any path segment starting
    with a dot) and entries whose base name matches an exclude pattern are skipped,
    and a skipped directory takes its whole subtree with it. Directories that
    survive are always listed. Files must additionally match the include patterns,
    be tracked by git when -g is given, and not look binary (a NUL byte in the
    first 8000 bytes).
    """

    epilog = """
    Examples:
      # Tree of the current directory
      filemapper

      # Tree of Go and Markdown files with their contents inline
      filemapper -p /path/to/project -i "*.go,*.md" -c

      # Skip dependencies and environment files
      filemapper -e "node_modules,vendor,*.env"

      # Flat list of git-tracked files, contents after the list, with line numbers
      filemapper -g --flat -c --separate-content --line-numbers

      # Contents without the START/END markers, written to a file
      filemapper -c --no-header-footer -o project.txt
    """

    parser = argparse.ArgumentParser(
        prog="filemapper",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"filemapper {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-p",
        "--path",
        type=Path,
        default=Path("."),
        metavar="PATH",
        help="Root path to scan (default: current directory).",
    )
    parser.add_argument(
        "-i",
        "--include",
        metavar="PATTERNS",
        help="Comma-separated file name patterns to include (e.g. '*.go,*.txt'). Directories are never filtered.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="PATTERNS",
        help="Comma-separated file or directory name patterns to exclude (e.g. 'node_modules,*.env').",
    )
    parser.add_argument(
        "-g",
        "--git",
        action="store_true",
        help="Only list files tracked by git.",
    )
    parser.add_argument(
        "-c",
        "--content",
        action="store_true",
        help="Include the content of text files.",
    )
    parser.add_argument(
        "--separate-content",
        action="store_true",
        help="Print the tree or list first, then all file contents afterward (no effect without -c).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "--flat",
        action="store_true",
        help="Show paths as a flat list instead of the default tree.",
    )
    parser.add_argument(
        "--line-numbers",
        action="store_true",
        help="Show line numbers for file content.",
    )
    parser.add_argument(
        "--header-footer",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show '----- CONTENT START -----' and '----- CONTENT END -----' markers (default: on).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped entries and other diagnostics to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Check combinations of arguments that argparse cannot express.

    ``--separate-content`` without ``-c`` has nothing to separate; it is accepted
    and has no effect, with a warning.

    Args:
        args: Parsed command-line arguments.
    """
    if args.separate_content and not args.content:
        logger.warning("--separate-content has no effect without -c/--content")


def config_from_args(args: argparse.Namespace) -> MapperConfig:
    """Build the run configuration from parsed arguments."""
    return MapperConfig.from_pattern_strings(
        args.path,
        include=args.include,
        exclude=args.exclude,
        git_tracked_only=args.git,
        show_tree=not args.flat,
        show_content=args.content,
        separate_content=args.separate_content,
        output=args.output,
        show_line_numbers=args.line_numbers,
        show_header_footers=args.header_footer,
    )
