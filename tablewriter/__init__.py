"""Aligned fixed-width text tables with ANSI- and wide-character-aware widths."""
from .ansi import CONTROL_SEQUENCE_RE, display_width, strip_control_sequences
from .readers import TableInputError, read_records
from .rows import explode, split_cell
from .writer import Align, TableWriter, pad_counts

__all__ = [
    "Align",
    "CONTROL_SEQUENCE_RE",
    "TableInputError",
    "TableWriter",
    "display_width",
    "explode",
    "pad_counts",
    "read_records",
    "split_cell",
    "strip_control_sequences",
]
