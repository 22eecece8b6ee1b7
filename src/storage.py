"""Persistence helpers (load/save) for the tasklist.

The file holds a bare JSON array of task records: no envelope, no
version field. It is read once at startup and rewritten once at exit.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from config import DEFAULT_FILE
from models import Task

logger = logging.getLogger(__name__)

TASKS_FILE = Path(DEFAULT_FILE)

TaskEntry = Dict[str, Any]


class StorageError(Exception):
    """The state file could not be read, parsed or written."""


class Storage:
    def __init__(self, path: Union[str, Path] = TASKS_FILE):
        self.path = Path(path)

    def load_records(self) -> List[TaskEntry]:
        """Load raw records from disk.

        Missing file or blank content -> empty list.
        """
        if not self.path.exists():
            logger.debug("No state file at %s; starting empty", self.path)
            return []
        try:
            text = self.path.read_text(encoding='utf-8')
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        if not text.strip():
            return []
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StorageError(f"{self.path} is not valid JSON: {e}") from e
        if data is None:
            return []
        if not isinstance(data, list):
            raise StorageError(f"{self.path} must contain a JSON array of tasks")
        return data

    def load_tasks(self) -> List[Task]:
        """Load and decode tasks; any malformed record is a StorageError."""
        tasks: List[Task] = []
        for pos, raw in enumerate(self.load_records(), start=1):
            try:
                tasks.append(Task.from_dict(raw))
            except (KeyError, TypeError, ValueError) as e:
                raise StorageError(f"{self.path}: task record {pos} is malformed: {e}") from e
        logger.info("Loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save_tasks(self, tasks: List[Task]) -> None:
        """Persist tasks to disk (pretty-printed), replacing the whole file."""
        records = [task.to_dict() for task in tasks]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=4)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        logger.info("Saved %d task(s) to %s", len(records), self.path)
