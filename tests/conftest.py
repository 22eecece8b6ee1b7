# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from models import Task
from storage import Storage
from store import TaskStore


@pytest.fixture()
def today() -> date:
    """Fixed 'current date' so urgency swatches are deterministic."""
    return date(2024, 1, 5)


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasklist.json"


@pytest.fixture()
def storage(tasks_file: Path) -> Storage:
    return Storage(tasks_file)


@pytest.fixture()
def store(storage: Storage) -> TaskStore:
    """Empty store backed by a per-test state file."""
    return TaskStore(storage)


@pytest.fixture()
def filled_store(store: TaskStore) -> TaskStore:
    """Three tasks: yesterday (C), today (H), tomorrow (L)."""
    store.add(Task("C", "2024-01-04", "08:00", ["first"]))
    store.add(Task("H", "2024-01-05", "09:30", ["second"]))
    store.add(Task("L", "2024-01-06", "23:59", ["third", "more"]))
    return store
