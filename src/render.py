"""Table rendering for the tasklist.

Layout only: colors come from the injected ``swatch`` callable, so the
same code renders ANSI swatches for the terminal and plain letters for
tests. Body lines are hard-wrapped at TASK_FIELD_WIDTH, mid-word.
"""
from datetime import date
from typing import Callable, Iterable, List, Optional

from models import Task, today_utc
from theme import Color, swatch as ansi_swatch

TASK_FIELD_WIDTH = 44

BORDER = "+----+------------+-------+---+---+" + "-" * TASK_FIELD_WIDTH + "+"
HEADER = "| N  |    Date    | Time  | P | D |" + " " * 19 + "Task" + " " * 21 + "|"
BLANK_CELLS = "|    |            |       |   |   |"

Swatch = Callable[[Optional[Color]], str]


def wrap_line(line: str, width: int = TASK_FIELD_WIDTH) -> List[str]:
    """Cut ``line`` into ``width``-sized chunks, each padded to ``width``."""
    if not line:
        return [' ' * width]
    return [line[i:i + width].ljust(width) for i in range(0, len(line), width)]


def _task_rows(number: int, task: Task, today: date, swatch: Swatch) -> List[str]:
    lead = (f"| {str(number).ljust(3)}| {task.date} | {task.time} | "
            f"{swatch(task.priority_color)} | {swatch(task.urgency_color(today))} |")
    rows: List[str] = []
    for line in task.lines:
        for chunk in wrap_line(line):
            rows.append((BLANK_CELLS if rows else lead) + chunk + "|")
    if not rows:
        rows.append(lead + ' ' * TASK_FIELD_WIDTH + "|")
    rows.append(BORDER)
    return rows


def render_table(tasks: Iterable[Task], today: Optional[date] = None,
                 swatch: Swatch = ansi_swatch) -> List[str]:
    """Render ``tasks`` as table lines (header included).

    Callers check for an empty store first; an empty iterable still
    yields the header.
    """
    if today is None:
        today = today_utc()
    lines = [BORDER, HEADER, BORDER]
    for number, task in enumerate(tasks, start=1):
        lines.extend(_task_rows(number, task, today, swatch))
    return lines
