"""Helpers for loading delimited table records from files or standard input.

Every failure while opening, decoding or parsing an input source surfaces as a
:class:`TableInputError`, so the command-line front end can report a single
clean message instead of a traceback from :mod:`csv` or the filesystem.
"""
from __future__ import annotations

import csv
import io
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO

__all__ = [
    "DEFAULT_DELIMITER",
    "TableInputError",
    "default_delimiter",
    "parse_records",
    "read_records",
    "write_records",
]

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "\t"


def default_delimiter() -> str:
    """Return the field delimiter used when none is given on the command line."""

    return os.environ.get("TABLEWRITER_DELIMITER", DEFAULT_DELIMITER)


class TableInputError(RuntimeError):
    """Raised when table records cannot be read from an input source."""


def parse_records(stream: TextIO, delimiter: str = DEFAULT_DELIMITER) -> List[List[str]]:
    """Parse every record of ``stream``.

    Quoted fields may span several lines; the embedded line breaks are kept so
    the writer can split them into physical rows later.
    """

    if len(delimiter) != 1:
        raise TableInputError(f"Delimiter must be a single character, got {delimiter!r}")
    try:
        return [record for record in csv.reader(stream, delimiter=delimiter)]
    except csv.Error as exc:
        raise TableInputError(f"Malformed input: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise TableInputError(f"Unable to decode input: {exc}") from exc


def read_records(
    source: Optional[Path] = None,
    delimiter: Optional[str] = None,
    encoding: str = "utf-8",
) -> List[List[str]]:
    """Read records from ``source``, or from standard input when it is ``None`` or ``-``."""

    delimiter = delimiter if delimiter is not None else default_delimiter()
    if source is None or str(source) == "-":
        logger.debug("Reading records from stdin")
        return parse_records(sys.stdin, delimiter)

    path = Path(source)
    try:
        with path.open(newline="", encoding=encoding) as handle:
            records = parse_records(handle, delimiter)
    except OSError as exc:
        raise TableInputError(f"Unable to open {path}: {exc.strerror or exc}") from exc
    logger.debug("Read %d records from %s", len(records), path)
    return records


def write_records(records: List[List[str]], delimiter: str = ",") -> str:
    """Serialise ``records`` back to delimited text."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerows(records)
    return buffer.getvalue()
