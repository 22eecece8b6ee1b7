# tests/test_render.py

from __future__ import annotations

from datetime import date

from models import Task
from render import BLANK_CELLS, BORDER, HEADER, TASK_FIELD_WIDTH, render_table, wrap_line
from theme import Color, RESET, plain_swatch, swatch

ROW_WIDTH = len(BORDER)


def test_frame_widths_line_up() -> None:
    assert TASK_FIELD_WIDTH == 44
    assert len(HEADER) == ROW_WIDTH
    assert len(BLANK_CELLS) + TASK_FIELD_WIDTH + 1 == ROW_WIDTH
    assert HEADER.index("Task") == len(BLANK_CELLS) + 19


def test_wrap_exact_width_is_one_row() -> None:
    assert wrap_line("x" * 44) == ["x" * 44]


def test_wrap_long_line_cuts_mid_word() -> None:
    line = "abcdefghij" * 5
    rows = wrap_line(line)
    assert rows == [line[:44], line[44:].ljust(44)]
    assert len(rows[1].rstrip()) == 6


def test_single_task_table(today: date) -> None:
    task = Task("H", "2024-01-05", "09:00", ["buy milk"])
    lines = render_table([task], today, plain_swatch)
    assert lines == [
        BORDER,
        HEADER,
        BORDER,
        "| 1  | 2024-01-05 | 09:00 | Y | Y |" + "buy milk".ljust(44) + "|",
        BORDER,
    ]


def test_multi_line_task_uses_continuation_rows(today: date) -> None:
    task = Task("C", "2024-01-04", "08:00", ["x" * 50, "short"])
    rows = render_table([task], today, plain_swatch)[3:]
    assert rows == [
        "| 1  | 2024-01-04 | 08:00 | R | R |" + "x" * 44 + "|",
        BLANK_CELLS + ("x" * 6).ljust(44) + "|",
        BLANK_CELLS + "short".ljust(44) + "|",
        BORDER,
    ]


def test_numbering_and_colors_per_task(today: date) -> None:
    tasks = [
        Task("N", "2024-01-06", "10:00", ["a"]),
        Task("L", "2024-01-05", "11:00", ["b"]),
    ]
    rows = render_table(tasks, today, plain_swatch)
    assert rows[3].startswith("| 1  | 2024-01-06 | 10:00 | G | G |")
    assert rows[5].startswith("| 2  | 2024-01-05 | 11:00 | B | Y |")


def test_unknown_priority_renders_blank_cell(today: date) -> None:
    task = Task("Q", "2024-01-05", "10:00", ["a"])
    row = render_table([task], today, plain_swatch)[3]
    assert row.startswith("| 1  | 2024-01-05 | 10:00 |   | Y |")


def test_ansi_swatch() -> None:
    assert swatch(Color.RED, enabled=True) == "\033[101m " + RESET
    assert swatch(Color.BLUE, enabled=True) == "\033[104m " + RESET
    assert swatch(Color.RED, enabled=False) == " "
    assert swatch(None, enabled=True) == " "
