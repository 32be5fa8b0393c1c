"""
tablewriter/formatting.py

Render parsed records in the output formats offered by the command line.
"""
from typing import List, Optional, Sequence

from tabulate import tabulate

from tablewriter.readers import write_records
from tablewriter.writer import Align, TableWriter

_TABULATE_ALIGN = {
    Align.LEFT: "left",
    Align.RIGHT: "right",
    Align.CENTER: "center",
}


def format_text(headers: Optional[List[str]], rows: List[List[str]],
                aligns: Sequence[Align] = ()) -> str:
    """Plain space-separated table with per-column alignment."""
    writer = TableWriter()
    writer.set_aligns(*aligns)
    if headers is not None:
        writer.header(*headers)
    for row in rows:
        writer.add(*row)
    return writer.render()


def format_markdown(headers: Optional[List[str]], rows: List[List[str]],
                    aligns: Sequence[Align] = ()) -> str:
    """
    GitHub-flavoured markdown table.
    - line breaks inside a cell become <br>, pipes are escaped
    - columns without an explicit alignment are left-aligned
    """
    def flat(cells):
        return [c.replace("\r", "").rstrip("\n").replace("\n", "<br>").replace("|", "\\|")
                for c in cells]

    ncols = max([len(headers or [])] + [len(r) for r in rows])
    # pad short rows to the full column count
    body = [flat(r) + [""] * (ncols - len(r)) for r in rows]
    colalign = [_TABULATE_ALIGN[aligns[i]] if i < len(aligns) else "left" for i in range(ncols)]
    if headers is None:
        return tabulate(body, tablefmt="github", colalign=colalign,
                        disable_numparse=True) + "\n"
    head = flat(headers) + [""] * (ncols - len(headers))
    return tabulate(body, headers=head, tablefmt="github", colalign=colalign,
                    disable_numparse=True) + "\n"


def format_csv(headers: Optional[List[str]], rows: List[List[str]],
               aligns: Sequence[Align] = ()) -> str:
    """Comma-separated records; alignment does not apply."""
    records = ([headers] if headers is not None else []) + rows
    return write_records(records)


FORMATTERS = {
    "text": format_text,
    "markdown": format_markdown,
    "csv": format_csv,
}
