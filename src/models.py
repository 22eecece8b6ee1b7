"""Data models for the terminal tasklist.

A Task stores its priority as the single character the user typed
(C/H/N/L) because that is also the persisted form. Urgency and the two
swatch colors are derived at render time and never written to disk.
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from theme import Color


class Priority(str, Enum):
    CRITICAL = 'C'
    HIGH = 'H'
    NORMAL = 'N'
    LOW = 'L'


class Urgency(str, Enum):
    INCOMING = 'I'
    TODAY = 'T'
    OVERDUE = 'O'


class TaskField(Enum):
    """Editable fields; values are the keywords the user types."""
    PRIORITY = 'priority'
    DATE = 'date'
    TIME = 'time'
    BODY = 'task'


PRIORITY_COLOR: Dict[str, Color] = {
    Priority.CRITICAL.value: Color.RED,
    Priority.HIGH.value: Color.YELLOW,
    Priority.NORMAL.value: Color.GREEN,
    Priority.LOW.value: Color.BLUE,
}

URGENCY_COLOR: Dict[Urgency, Color] = {
    Urgency.TODAY: Color.YELLOW,
    Urgency.INCOMING: Color.GREEN,
    Urgency.OVERDUE: Color.RED,
}

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}")


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


@dataclass
class Task:
    """A single task.

    Fields:
        priority: One of "C", "H", "N", "L".
        date: ISO date string, "YYYY-MM-DD".
        time: 24-hour "HH:MM".
        lines: Body lines, in order. Never empty once stored.
    """
    priority: str
    date: str
    time: str
    lines: List[str] = field(default_factory=list)

    @property
    def priority_color(self) -> Optional[Color]:
        return PRIORITY_COLOR.get(self.priority)

    def set_priority(self, value: str) -> None:
        """Replace the priority. Unknown values simply lose their color."""
        self.priority = value

    def add_line(self, text: str) -> None:
        self.lines.append(text)

    def urgency(self, today: Optional[date] = None) -> Urgency:
        """Classify by whole days between ``today`` (UTC) and the due date."""
        if today is None:
            today = today_utc()
        days_until = (date.fromisoformat(self.date) - today).days
        if days_until == 0:
            return Urgency.TODAY
        if days_until > 0:
            return Urgency.INCOMING
        return Urgency.OVERDUE

    def urgency_color(self, today: Optional[date] = None) -> Color:
        return URGENCY_COLOR[self.urgency(today)]

    # -------------------- serialization --------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            'priority': self.priority,
            'date': self.date,
            'time': self.time,
            'lines': list(self.lines),
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> 'Task':
        """Build a Task from a persisted record.

        Accepts the legacy body key 'lineList'. Raises KeyError,
        TypeError or ValueError on malformed records.
        """
        if not isinstance(raw, Mapping):
            raise TypeError(f'task record must be an object, got {type(raw).__name__}')
        lines = raw['lines'] if 'lines' in raw else raw['lineList']
        if not isinstance(lines, list) or not all(isinstance(s, str) for s in lines):
            raise TypeError('task lines must be a list of strings')
        priority, due_date, due_time = raw["priority"], raw["date"], raw["time"]
        if priority not in PRIORITY_COLOR:
            raise ValueError(f"unknown priority: {priority!r}")
        if not isinstance(due_date, str) or not _DATE_RE.fullmatch(due_date):
            raise ValueError(f"date must be YYYY-MM-DD: {due_date!r}")
        date.fromisoformat(due_date)
        if not isinstance(due_time, str) or not _TIME_RE.fullmatch(due_time):
            raise ValueError(f"time must be HH:MM: {due_time!r}")
        time.fromisoformat(due_time)
        return cls(priority=priority, date=due_date, time=due_time, lines=list(lines))

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(priority={self.priority}, date={self.date}, time={self.time}, lines={len(self.lines)})"
