"""Task store: the ordered in-memory task list and its load/save lifecycle.

Positions are the only identifiers. Task numbers shown to the user are
1-based positions; every method here takes 0-based indexes.
"""
import logging
from typing import Iterator, List, Sequence, Tuple, Union

from models import Task, TaskField
from storage import Storage

logger = logging.getLogger(__name__)

FieldValue = Union[str, Sequence[str]]


class BlankTaskError(ValueError):
    """A task body would end up with no lines."""


class TaskStore:
    def __init__(self, storage: Storage):
        self.storage = storage
        self._tasks: List[Task] = []

    # -------------------- lifecycle --------------------
    def load(self) -> None:
        """Replace contents with the persisted tasks (empty if none)."""
        loaded = self.storage.load_tasks()
        kept = [t for t in loaded if t.lines]
        if len(kept) != len(loaded):
            logger.warning("Dropped %d blank task(s) from %s", len(loaded) - len(kept), self.storage.path)
        self._tasks = kept

    def save(self) -> None:
        self.storage.save_tasks(self._tasks)

    # -------------------- queries --------------------
    def tasks(self) -> Tuple[Task, ...]:
        return tuple(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[index]

    def is_empty(self) -> bool:
        return not self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    # -------------------- task operations --------------------
    def add(self, task: Task) -> None:
        if not task.lines:
            raise BlankTaskError("task body is empty")
        self._tasks.append(task)
        logger.debug("Added task %d due %s %s", len(self._tasks), task.date, task.time)

    def edit_field(self, index: int, field: TaskField, value: FieldValue) -> None:
        """Replace one field of the task at ``index``.

        A body replacement is committed only when it has at least one
        line; otherwise BlankTaskError is raised and the old body stays.
        """
        task = self._tasks[index]
        if field is TaskField.PRIORITY:
            task.set_priority(str(value))
        elif field is TaskField.DATE:
            task.date = str(value)
        elif field is TaskField.TIME:
            task.time = str(value)
        elif field is TaskField.BODY:
            if isinstance(value, str):
                raise TypeError("body must be a sequence of lines")
            lines = list(value)
            if not lines:
                raise BlankTaskError("task body is empty")
            task.lines = lines
        else:  # pragma: no cover - TaskField is closed
            raise ValueError(f"unknown field: {field}")
        logger.debug("Edited %s of task %d", field.value, index + 1)

    def delete(self, index: int) -> Task:
        task = self._tasks.pop(index)
        logger.debug("Deleted task %d", index + 1)
        return task
