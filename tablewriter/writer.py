"""
tablewriter/writer.py

Incremental fixed-width text table writer.

Rows are buffered until :meth:`TableWriter.flush`, which renders headers and
data rows padded to the widest cell seen in each column and then discards the
data rows. Headers, column widths and alignment survive a flush, so a single
writer can print several batches with consistent column sizing.
"""

import enum
import logging
import sys
from typing import Any, List, Optional, TextIO, Tuple, Union

from tablewriter.ansi import display_width
from tablewriter.rows import explode

logger = logging.getLogger(__name__)


class Align(enum.IntEnum):
    """Horizontal alignment of a column."""

    LEFT = 1
    RIGHT = 2
    CENTER = 3

    @classmethod
    def parse(cls, value: Union["Align", int, str]) -> "Align":
        """
        Return the member for *value*.

        Accepts members, their integer values and the names ``l``/``left``,
        ``r``/``right`` and ``c``/``center`` in any case.

        Raises:
            ValueError if *value* names no alignment.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _ALIGN_NAMES:
                return _ALIGN_NAMES[key]
            raise ValueError(f"Unknown alignment: {value!r}")
        return cls(value)

    @classmethod
    def coerce(cls, value: Any) -> "Align":
        """Like :meth:`parse`, but unrecognized values fall back to LEFT."""
        try:
            return cls.parse(value)
        except (TypeError, ValueError):
            logger.debug("Treating unrecognized alignment %r as left", value)
            return cls.LEFT


_ALIGN_NAMES = {
    "l": Align.LEFT, "left": Align.LEFT,
    "r": Align.RIGHT, "right": Align.RIGHT,
    "c": Align.CENTER, "center": Align.CENTER, "centre": Align.CENTER,
}


def pad_counts(align: Align, width: int, size: int) -> Tuple[int, int]:
    """
    Return the (left, right) space counts that pad a *size*-wide cell to *width*.

    Center alignment puts the odd space on the right. A cell wider than its
    column gets no padding at all.
    """
    deficit = max(width - size, 0)
    if align == Align.RIGHT:
        return deficit, 0
    if align == Align.CENTER:
        left = deficit // 2
        return left, deficit - left
    return 0, deficit


class TableWriter:
    """
    Buffer rows and write them as an aligned, space-separated text table.

    Args:
        output: Destination with a ``write(str)`` method. Defaults to the
            current ``sys.stdout`` at flush time.

    Example::

        w = TableWriter()
        w.header("Name", "Age")
        w.add("Bob", "5")
        w.flush()   # "Name Age\\nBob  5  \\n"
    """

    def __init__(self, output: Optional[TextIO] = None) -> None:
        self.output = output
        self._max: List[int] = []
        self._aligns: List[Align] = []
        self._headers: List[List[str]] = []
        self._rows: List[List[str]] = []

    @classmethod
    def stdout(cls) -> "TableWriter":
        """Return a writer bound to the process's standard output."""
        return cls(sys.stdout)

    @property
    def widths(self) -> List[int]:
        """Tracked display width of every column seen so far."""
        return list(self._max)

    @property
    def aligns(self) -> List[Align]:
        return list(self._aligns)

    @property
    def headers(self) -> List[List[str]]:
        return [list(row) for row in self._headers]

    @property
    def rows(self) -> List[List[str]]:
        return [list(row) for row in self._rows]

    def set_aligns(self, *aligns: Union[Align, int, str]) -> None:
        """Replace the per-column alignment; missing columns align left."""
        self._aligns = [Align.coerce(a) for a in aligns]

    def header(self, *cells: Any) -> None:
        """Insert one logical header row."""
        for sub in explode(cells):
            self._expand(sub)
            self._headers.append(sub)

    def add(self, *cells: Any) -> None:
        """Insert one logical data row."""
        for sub in explode(cells):
            self._expand(sub)
            self._rows.append(sub)

    def _expand(self, row: List[str]) -> None:
        # Widths only ever grow; new columns start at zero.
        if len(self._max) < len(row):
            self._max.extend([0] * (len(row) - len(self._max)))
        for i, cell in enumerate(row):
            size = display_width(cell)
            if self._max[i] < size:
                self._max[i] = size

    def _align(self, column: int) -> Align:
        if column < len(self._aligns):
            return self._aligns[column]
        return Align.LEFT

    def _format_row(self, row: List[str]) -> str:
        parts = []
        for i, cell in enumerate(row):
            left, right = pad_counts(self._align(i), self._max[i], display_width(cell))
            parts.append(" " * left + cell + " " * right)
        return " ".join(parts) + "\n"

    def render(self) -> str:
        """Return the rendered table for the buffered rows without flushing."""
        return "".join(self._format_row(row) for row in self._headers + self._rows)

    def flush(self) -> None:
        """Write headers and buffered data rows to the output, then drop the data rows."""
        output = self.output if self.output is not None else sys.stdout
        output.write(self.render())
        logger.debug("Flushed %d header rows and %d data rows", len(self._headers), len(self._rows))
        self._rows.clear()
