"""Command line: search file contents under a directory for a regular expression."""

from __future__ import annotations

import argparse
import os
import re
import sys
from collections.abc import Sequence
from typing import TextIO

from practools.cgrep.errorlog import ErrorLog
from practools.cgrep.result import Result
from practools.cgrep.search import open_dir


def exec_search(
    full_path: str,
    pattern: str,
    result: Result,
    errors: ErrorLog,
    base: str | None = None,
) -> None:
    """Search the tree at ``full_path`` for ``pattern``, filling ``result`` and ``errors``.

    Raises ``re.error`` if the pattern does not compile.
    """
    compiled = re.compile(pattern)
    root = open_dir(full_path, compiled, base)
    root.search(result, errors)


def render(result: Result, stream: TextIO, with_content: bool = False) -> None:
    """Write the result as file names, or with matched lines when ``with_content``."""
    if with_content:
        result.render_with_content(stream)
    else:
        result.render_files(stream)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cgrep",
        description=(
            "Search file names contains argument. "
            "Arguments are treated as regular expressions."
        ),
    )
    parser.add_argument(
        "pattern", help="a search string that can be compiled as a regular expression"
    )
    parser.add_argument("-d", "--dir", default="./", help="searching directory")
    parser.add_argument(
        "-c",
        "--with-content",
        action="store_true",
        help="render with matched content lines",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search command; return the exit status."""
    args = _parser().parse_args(argv)
    result, errors = Result(), ErrorLog()
    try:
        exec_search(os.path.abspath(args.dir), args.pattern, result, errors, os.getcwd())
    except re.error as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    failure = errors.error()
    if failure is not None:
        print(f"Error: {failure}", file=sys.stderr)
        return 1
    render(result, sys.stdout, args.with_content)
    return 0


if __name__ == "__main__":
    sys.exit(main())