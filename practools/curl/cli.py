"""Command line: an http/https client that prints the request and the response."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from practools.curl.client import ClientError, build_client
from practools.curl.validation import ValidationError, validate_flags


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="curl",
        description=(
            "curl is http/https client command. "
            "Available HTTP methods: GET, POST, PUT, DELETE, PATCH. "
            "Available Content-Type: application/json (only for POST, PUT, PATCH)."
        ),
    )
    parser.add_argument("url", nargs="*", help="request URL")
    parser.add_argument("-X", "--request", default="GET", help="HTTP method")
    parser.add_argument("-d", "--data", default="", help="HTTP Post, Put, Patch Data")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        help="Pass custom header(s) to server",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client command; return the exit status."""
    args = _parser().parse_args(argv)
    if len(args.url) != 1:
        print(
            f"Error: accepts 1 arg(s), received {len(args.url)}: You must set only URL",
            file=sys.stderr,
        )
        return 1
    raw_url = args.url[0]
    try:
        validate_flags(raw_url, args.request, args.data, args.header)
        client = build_client(raw_url, args.request, args.data, args.header)
        request, response = client.execute()
    except (ValidationError, ClientError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(request)
    print(response)
    return 0


if __name__ == "__main__":
    sys.exit(main())