"""
Command-line entry point.

    name-sorter ./unsorted-names-list.txt
    name-sorter ./unsorted-names-list.txt -o ./out.txt --print
"""

from __future__ import annotations

import argparse
import logging
import sys

from namesort.paths import DEFAULT_OUTPUT_PATH
from namesort.sorter import NameSorter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="name-sorter",
        description="Sort a list of names by surname, then by given names",
    )
    parser.add_argument("input_file", help="Input file with one name per line")
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT_PATH,
        help=f"Output file (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--print",
        dest="print_names",
        action="store_true",
        help="Also print the sorted names to stdout",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    sorter = NameSorter()
    try:
        sorted_names = sorter.sort_file(args.input_file, args.output)
    except (ValueError, OSError) as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    if args.print_names:
        for name in sorted_names:
            print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
