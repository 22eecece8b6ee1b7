"""Input parsing and re-prompting for task fields.

The parse_* functions are pure: they take one raw line and either return
the normalized value or raise ParseError. Prompter wraps them in the
interactive policy: show the prompt, read a line, and on failure report
it and ask again, forever. End of input is not handled here; EOFError
propagates to the command loop.
"""
import re
from datetime import date, time
from typing import Callable, List

from models import Priority, TaskField

PRIORITIES = tuple(p.value for p in Priority)
_DIGITS_RE = re.compile(r'[0-9]+')

PRIORITY_PROMPT = "Input the task priority (C, H, N, L):"
DATE_PROMPT = "Input the date (yyyy-mm-dd):"
TIME_PROMPT = "Input the time (hh:mm):"
BODY_PROMPT = "Input a new task (enter a blank line to end):"
FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"

Reader = Callable[[], str]
Echo = Callable[[str], None]


class ParseError(ValueError):
    """Raised when a raw input line cannot be interpreted."""


def _is_digits(text: str) -> bool:
    return _DIGITS_RE.fullmatch(text) is not None


def parse_priority(raw: str) -> str:
    value = raw.upper()
    if len(value) != 1 or value not in PRIORITIES:
        raise ParseError(f"invalid priority: {raw!r}")
    return value


def parse_date(raw: str) -> str:
    """'2023-12-1' -> '2023-12-01'; each part is zero-padded to 4/2/2."""
    parts = raw.split('-')
    if len(parts) != 3 or not all(_is_digits(p) for p in parts):
        raise ParseError(f"invalid date: {raw!r}")
    padded = [part.zfill(width) for part, width in zip(parts, (4, 2, 2))]
    if [len(p) for p in padded] != [4, 2, 2]:
        raise ParseError(f"invalid date: {raw!r}")
    try:
        parsed = date.fromisoformat('-'.join(padded))
    except ValueError as e:
        raise ParseError(f"invalid date: {raw!r}") from e
    return parsed.isoformat()


def parse_time(raw: str) -> str:
    """'9:5' -> '09:05'."""
    parts = raw.split(':')
    if len(parts) != 2 or not all(_is_digits(p) and len(p) <= 2 for p in parts):
        raise ParseError(f"invalid time: {raw!r}")
    hour, minute = (int(p) for p in parts)
    try:
        parsed = time(hour, minute)
    except ValueError as e:
        raise ParseError(f"invalid time: {raw!r}") from e
    return parsed.strftime('%H:%M')


def parse_task_number(raw: str, size: int) -> int:
    """Validate a 1-based task number and return the 0-based index."""
    if not _is_digits(raw):
        raise ParseError(f"invalid task number: {raw!r}")
    number = int(raw)
    if not 1 <= number <= size:
        raise ParseError(f"task number out of range: {number}")
    return number - 1


def parse_field(raw: str) -> TaskField:
    try:
        return TaskField(raw.lower())
    except ValueError as e:
        raise ParseError(f"invalid field: {raw!r}") from e


class Prompter:
    def __init__(self, read: Reader, echo: Echo):
        self.read = read
        self.echo = echo

    def _ask(self, prompt: str, parse: Callable[[str], object], invalid: str):
        self.echo(prompt)
        while True:
            try:
                return parse(self.read())
            except ParseError:
                self.echo(invalid)
                self.echo(prompt)

    def priority(self) -> str:
        return self._ask(PRIORITY_PROMPT, parse_priority, "The input priority is invalid")

    def date(self) -> str:
        return self._ask(DATE_PROMPT, parse_date, "The input date is invalid")

    def time(self) -> str:
        return self._ask(TIME_PROMPT, parse_time, "The input time is invalid")

    def field(self) -> TaskField:
        return self._ask(FIELD_PROMPT, parse_field, "Invalid field")

    def task_number(self, size: int) -> int:
        """Ask for a task number in [1, size]; returns the 0-based index."""
        prompt = f"Input the task number (1-{size}):"
        return self._ask(prompt, lambda raw: parse_task_number(raw, size), "Invalid task number")

    def body(self) -> List[str]:
        """Read trimmed lines until a blank one; blank lines are never kept."""
        self.echo(BODY_PROMPT)
        lines: List[str] = []
        line = self.read().strip()
        while line:
            lines.append(line)
            line = self.read().strip()
        return lines
