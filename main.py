#!/usr/bin/env python3

__VERSION__ = "1.0.0"
__DESCRIPTION__ = "Render delimited text as an aligned fixed-width table."
__AUTHOR__ = "tablewriter contributors"

import sys

import argparse
import logging
from pathlib import Path

from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from tablewriter.formatting import FORMATTERS
from tablewriter.readers import TableInputError, default_delimiter, read_records
from tablewriter.writer import Align


def parse_aligns(value: str) -> List[Align]:
    """Parse a comma-separated alignment list such as ``l,r,c``."""
    try:
        return [Align.parse(part) for part in value.split(",")]
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to stderr through rich."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    # replace the handler from an earlier call instead of stacking another
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)

    c_handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=verbose)
    c_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    c_handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(c_handler)

    logging.getLogger(__name__).debug("Logging initialized")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"tablewriter v{__VERSION__} | {__DESCRIPTION__}",
        epilog=f"{__AUTHOR__}")
    parser.add_argument("input", nargs="?", type=Path, default=None,
                        help="Delimited input file (default: stdin, also '-')")
    parser.add_argument("--delimiter", "-d", default=default_delimiter(),
                        help="Field delimiter (default: tab, or $TABLEWRITER_DELIMITER)")
    parser.add_argument("--no-header", action="store_true",
                        help="Treat the first record as data instead of a header")
    parser.add_argument("--align", "-a", type=parse_aligns, default=[],
                        help="Comma-separated column alignments, e.g. 'l,r,c'")
    parser.add_argument("--format", "-f", choices=sorted(FORMATTERS), default="text",
                        help="Output format")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def render_command(args: argparse.Namespace) -> str:
    records = read_records(args.input, delimiter=args.delimiter)
    if args.no_header or not records:
        headers, rows = None, records
    else:
        headers, rows = records[0], records[1:]
    logging.debug("Rendering %d rows as %s", len(rows), args.format)
    return FORMATTERS[args.format](headers, rows, args.align)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        text = render_command(args)
    except TableInputError as e:
        logging.error("%s", e)
        return 1

    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[INFO] Cancelled by user.")
        sys.exit(1)
