"""
tablewriter/rows.py

Splitting of logical rows with embedded line breaks into physical rows.
"""

import logging
from typing import Any, List, Sequence

logger = logging.getLogger(__name__)


def to_cell(value: Any) -> str:
    """Coerce a cell value to text; ``None`` becomes an empty cell."""
    return "" if value is None else str(value)


def split_cell(cell: str) -> List[str]:
    """
    Return the line fragments of a single cell.

    Carriage returns are dropped and one trailing line break is ignored, so
    ``"a\\r\\nb\\n"`` yields ``["a", "b"]``.
    """
    text = cell.replace("\r", "")
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def explode(row: Sequence[Any]) -> List[List[str]]:
    """
    Split one logical row into physical rows of the same column count.

    Physical row ``j`` holds the ``j``-th line of every cell, or ``""`` where a
    cell has fewer lines. A row without columns yields a single empty row.
    """
    fragments = [split_cell(to_cell(cell)) for cell in row]
    height = max((len(f) for f in fragments), default=1)

    result = [[""] * len(fragments) for _ in range(height)]
    for i, lines in enumerate(fragments):
        for j, line in enumerate(lines):
            result[j][i] = line

    if height > 1:
        logger.debug("Split %d-column row into %d physical rows", len(fragments), height)
    return result
