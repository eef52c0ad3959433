#!/usr/bin/env python3
"""
Resolve a query from the command line and print the answer fragment.

Examples:
    python scripts/resolve_query.py "U+1F352"
    python scripts/resolve_query.py "F0 9F 8D 92 F0 9F 8D 87"
    python scripts/resolve_query.py --help-table
"""

from __future__ import annotations

import argparse
import logging
import sys

from quickchar.resolver import UnicodeResolver


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Describe the Unicode character(s) a query denotes.")
    parser.add_argument("query", nargs="*", help="Query text; several arguments are joined with spaces.")
    parser.add_argument("--help-table", action="store_true", help="Print the example table instead.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log branch decisions.")
    return parser


def main() -> int:
    args = _build_arg_parser().parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    resolver = UnicodeResolver()
    result = resolver.resolve(resolver.parse(" ".join(args.query), is_help=args.help_table))
    if not result.success:
        print(f"no match: {result.error_message}", file=sys.stderr)
        return 1

    print(result.result, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
