"""CLI entry point for pglob — I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import TextIO

from pathspec import PathSpec
from pathspec.pattern import Pattern

from pathglob import PathglobError
from pathglob.patterns import PATTERN_FACTORIES, load_pattern_file, match_path
from pathglob.translator import PathStyle, native_path_style, translate


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``pglob`` command.
    """
    parser = argparse.ArgumentParser(
        prog="pglob",
        description="match path strings against glob patterns",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Candidate paths (default: one per line from stdin)",
    )
    parser.add_argument(
        "-e",
        "--pattern",
        action="append",
        default=[],
        dest="patterns",
        help="Glob pattern to match (can be specified multiple times)",
    )
    parser.add_argument(
        "-f",
        "--patterns-file",
        action="append",
        default=[],
        dest="pattern_files",
        help="Read glob patterns from a file, one per line",
    )
    parser.add_argument(
        "--style",
        choices=["posix", "dos", "native"],
        default="posix",
        help="Path separator convention (default: posix)",
    )
    parser.add_argument(
        "--print-regex",
        action="store_true",
        dest="print_regex",
        help="Print the translated regex of each -e pattern and exit",
    )
    parser.add_argument(
        "-v",
        "--invert-match",
        action="store_true",
        dest="invert",
        help="Print paths that match none of the patterns",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug messages to stderr",
    )
    return parser


def run_pglob(argv: list[str] | None = None, stdin: TextIO | None = None) -> str:
    """Run pglob with provided CLI args and return formatted output.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.
        stdin: Stream to read candidate paths from when none are given
            on the command line. Defaults to ``sys.stdin``.

    Returns:
        str: Output lines joined by newlines.

    Raises:
        PathglobError: On any user-facing validation or pattern error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_with_args(args, stdin)


def _resolve_style(style: str) -> PathStyle:
    if style == "native":
        return native_path_style()
    return "dos" if style == "dos" else "posix"


def _build_spec(args: argparse.Namespace, path_style: PathStyle) -> PathSpec:
    """Combine ``-e`` patterns and ``-f`` files into one spec.

    Raises:
        PathglobError: If no pattern is given or a file cannot be read.
    """
    if not args.patterns and not args.pattern_files:
        raise PathglobError("at least one pattern is required (-e or -f)")

    # -e patterns are taken verbatim, without comment or blank-line skipping
    factory = PATTERN_FACTORIES[path_style]
    patterns: list[Pattern] = [factory(pattern) for pattern in args.patterns]
    for pattern_file in args.pattern_files:
        file_spec = load_pattern_file(Path(pattern_file), path_style)
        if file_spec is None:
            raise PathglobError(f"cannot read patterns file '{pattern_file}'")
        patterns.extend(file_spec.patterns)
    return PathSpec(patterns)


def _read_paths(args: argparse.Namespace, stdin: TextIO | None) -> list[str]:
    if args.paths:
        return list(args.paths)
    stream = stdin if stdin is not None else sys.stdin
    return [line.rstrip("\r\n") for line in stream]


def _run_with_args(args: argparse.Namespace, stdin: TextIO | None = None) -> str:
    """Run the translate/match pipeline for parsed arguments.

    Raises:
        PathglobError: On any user-facing validation or pattern error.
    """
    path_style = _resolve_style(args.style)

    if args.print_regex:
        if not args.patterns:
            raise PathglobError("--print-regex requires at least one -e pattern")
        return "\n".join(translate(pattern, path_style) for pattern in args.patterns)

    spec = _build_spec(args, path_style)
    matched = [
        path
        for path in _read_paths(args, stdin)
        if match_path(spec, path) != args.invert
    ]
    return "\n".join(matched)


def main() -> None:
    """Run the CLI entry point with process arguments.

    Parses args exactly once and writes output to stdout.
    Exits with code 1 on user-facing errors.
    """
    parser = build_parser()
    args = parser.parse_args()  # single parse

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        output = _run_with_args(args)
    except PathglobError as exc:
        sys.stderr.write(f"pglob: {exc}\n")
        sys.exit(1)
    except re.error as exc:
        sys.stderr.write(f"pglob: invalid translated regex: {exc}\n")
        sys.exit(1)

    if output:
        sys.stdout.write(output + "\n")
