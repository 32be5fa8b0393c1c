from __future__ import annotations

import io

import pytest

from tablewriter.ansi import display_width
from tablewriter.writer import Align, TableWriter, pad_counts


def test_header_and_rows_left_aligned(writer: TableWriter, sink: io.StringIO) -> None:
    writer.header("Name", "Age")
    writer.add("Al", "30")
    writer.add("Bob", "5")
    writer.flush()

    assert sink.getvalue() == "Name Age\nAl   30 \nBob  5  \n"
    assert writer.widths == [4, 3]


def test_right_alignment_applies_to_headers_and_rows(writer: TableWriter, sink: io.StringIO) -> None:
    writer.set_aligns(Align.RIGHT, "r")
    writer.header("Name", "Age")
    writer.add("Al", "30")
    writer.add("Bob", "5")
    writer.flush()

    assert sink.getvalue() == "Name Age\n  Al  30\n Bob   5\n"


def test_center_alignment_and_default_for_missing_columns(writer: TableWriter, sink: io.StringIO) -> None:
    writer.set_aligns("center")
    writer.add("abcde", "xyz")
    writer.add("a", "q")
    writer.add("ab", "")
    writer.flush()

    assert sink.getvalue().splitlines() == [
        "abcde xyz",
        "  a   q  ",
        " ab      ",
    ]


@pytest.mark.parametrize(
    ("align", "width", "size", "expected"),
    [
        (Align.LEFT, 5, 2, (0, 3)),
        (Align.RIGHT, 5, 2, (3, 0)),
        (Align.CENTER, 5, 3, (1, 1)),
        (Align.CENTER, 4, 1, (1, 2)),
        (Align.CENTER, 3, 3, (0, 0)),
        (Align.LEFT, 2, 5, (0, 0)),
        (Align.RIGHT, 2, 5, (0, 0)),
        (Align.CENTER, 2, 5, (0, 0)),
    ],
)
def test_pad_counts(align: Align, width: int, size: int, expected: tuple[int, int]) -> None:
    assert pad_counts(align, width, size) == expected


def test_multiline_cells_become_aligned_physical_rows(writer: TableWriter) -> None:
    writer.header("A", "B")
    writer.add("x\ny", "long")

    assert writer.rows == [["x", "long"], ["y", ""]]
    assert writer.render() == "A B   \nx long\ny     \n"


def test_multiline_header(writer: TableWriter) -> None:
    writer.header("First\nName", "Age")
    writer.add("Al", "30")

    assert writer.headers == [["First", "Age"], ["Name", ""]]
    assert writer.render() == "First Age\nName     \nAl    30 \n"


def test_control_sequences_are_padded_by_visible_width(writer: TableWriter) -> None:
    red = "\x1b[31mred\x1b[0m"
    writer.add(red, "z")
    writer.add("blue", "z")

    assert writer.widths == [4, 1]
    assert writer.render() == f"{red}  z\nblue z\n"


def test_wide_characters_count_double(writer: TableWriter) -> None:
    writer.add("日本", "x")
    writer.add("abc", "y")

    assert writer.render() == "日本 x\nabc  y\n"


def test_flush_clears_rows_but_keeps_headers_and_widths(writer: TableWriter, sink: io.StringIO) -> None:
    writer.header("H")
    writer.add("wide-cell")
    writer.flush()
    first = sink.getvalue()

    sink.seek(0)
    sink.truncate()
    writer.add("x")
    writer.flush()

    assert first == "H        \nwide-cell\n"
    assert sink.getvalue() == "H        \nx        \n"
    assert writer.rows == []
    assert writer.headers == [["H"]]
    assert writer.widths == [9]


def test_flush_with_only_headers_repeats_them(writer: TableWriter, sink: io.StringIO) -> None:
    writer.header("a", "b")
    writer.flush()
    writer.flush()

    assert sink.getvalue() == "a b\na b\n"


def test_rows_with_differing_column_counts(writer: TableWriter) -> None:
    writer.add("a")
    writer.add("bb", "c", "ddd")
    writer.add("e", "ff")

    assert writer.widths == [2, 2, 3]
    assert writer.render() == "a \nbb c  ddd\ne  ff\n"


def test_empty_row_renders_empty_line(writer: TableWriter) -> None:
    writer.add()

    assert writer.rows == [[]]
    assert writer.render() == "\n"


def test_non_string_cells_are_coerced(writer: TableWriter) -> None:
    writer.add(1, None, 2.5)

    assert writer.rows == [["1", "", "2.5"]]


def test_default_output_is_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    writer = TableWriter()
    writer.add("x", "y")
    writer.flush()

    assert capsys.readouterr().out == "x y\n"


def test_stdout_constructor(capsys: pytest.CaptureFixture[str]) -> None:
    writer = TableWriter.stdout()
    writer.add("only")
    writer.flush()

    assert capsys.readouterr().out == "only\n"


def test_flush_writes_once() -> None:
    class RecordingSink:
        def __init__(self) -> None:
            self.writes: list[str] = []

        def write(self, text: str) -> int:
            self.writes.append(text)
            return len(text)

    out = RecordingSink()
    writer = TableWriter(out)  # type: ignore[arg-type]
    writer.header("a")
    writer.add("b")
    writer.add("c")
    writer.flush()

    assert out.writes == ["a\nb\nc\n"]


def test_set_aligns_replaces_previous_settings(writer: TableWriter) -> None:
    writer.set_aligns(Align.RIGHT, Align.RIGHT)
    writer.set_aligns(Align.CENTER)

    assert writer.aligns == [Align.CENTER]


def test_set_aligns_accepts_values_and_names(writer: TableWriter) -> None:
    writer.set_aligns(2, "C", "Left", "bogus", 99)

    assert writer.aligns == [Align.RIGHT, Align.CENTER, Align.LEFT, Align.LEFT, Align.LEFT]


def test_align_parse_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        Align.parse("middle")


def test_widths_never_shrink(writer: TableWriter) -> None:
    writer.add("long value")
    writer.flush()
    writer.add("s")

    assert writer.widths == [10]


@pytest.mark.parametrize("aligns", [(), (Align.RIGHT,), (Align.CENTER, Align.RIGHT, Align.LEFT)])
def test_every_line_spans_full_table_width(aligns: tuple[Align, ...]) -> None:
    writer = TableWriter(io.StringIO())
    writer.set_aligns(*aligns)
    writer.header("id", "name", "score")
    writer.add("1", "\x1b[1mAda\x1b[0m", "99.5")
    writer.add("22", "Grace\nHopper", "7")
    writer.add("333", "Linus", "")

    total = sum(writer.widths) + len(writer.widths) - 1
    for line in writer.render().splitlines():
        assert display_width(line) == total
