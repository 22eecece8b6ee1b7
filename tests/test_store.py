# tests/test_store.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from models import Task, TaskField
from storage import Storage
from store import BlankTaskError, TaskStore


def test_new_store_is_empty(store: TaskStore) -> None:
    assert store.is_empty()
    assert len(store) == 0
    assert store.tasks() == ()


def test_add_appends_in_order(filled_store: TaskStore) -> None:
    assert [t.lines[0] for t in filled_store] == ["first", "second", "third"]
    assert not filled_store.is_empty()


def test_add_rejects_blank_body(store: TaskStore) -> None:
    with pytest.raises(BlankTaskError):
        store.add(Task("C", "2024-01-05", "10:00"))
    assert len(store) == 0


def test_tasks_is_a_read_only_view(filled_store: TaskStore) -> None:
    view = filled_store.tasks()
    assert isinstance(view, tuple)
    assert len(view) == 3


def test_delete_shifts_following_tasks(filled_store: TaskStore) -> None:
    removed = filled_store.delete(0)
    assert removed.lines == ["first"]
    assert len(filled_store) == 2
    assert filled_store.get(0).lines == ["second"]
    assert filled_store.get(1).lines == ["third", "more"]


@pytest.mark.parametrize(
    "field, value, attr, expected",
    [
        (TaskField.PRIORITY, "N", "priority", "N"),
        (TaskField.DATE, "2030-06-01", "date", "2030-06-01"),
        (TaskField.TIME, "06:45", "time", "06:45"),
        (TaskField.BODY, ["new body"], "lines", ["new body"]),
    ],
)
def test_edit_field_replaces_only_that_field(filled_store: TaskStore, field, value, attr, expected) -> None:
    before = filled_store.get(1).to_dict()
    filled_store.edit_field(1, field, value)
    after = filled_store.get(1).to_dict()
    assert after[attr] == expected
    for other in set(before) - {attr}:
        assert after[other] == before[other]


def test_edit_blank_body_keeps_previous_body(filled_store: TaskStore) -> None:
    with pytest.raises(BlankTaskError):
        filled_store.edit_field(2, TaskField.BODY, [])
    assert filled_store.get(2).lines == ["third", "more"]


def test_save_then_load_round_trip(filled_store: TaskStore, storage: Storage) -> None:
    filled_store.save()
    reloaded = TaskStore(storage)
    reloaded.load()
    assert [t.to_dict() for t in reloaded] == [t.to_dict() for t in filled_store]


def test_load_without_file_is_empty(store: TaskStore, tasks_file: Path) -> None:
    store.load()
    assert store.is_empty()
    assert not tasks_file.exists()


def test_load_drops_blank_records(store: TaskStore, tasks_file: Path) -> None:
    tasks_file.write_text(json.dumps([
        {"priority": "C", "date": "2024-01-05", "time": "10:00", "lines": []},
        {"priority": "N", "date": "2024-01-06", "time": "11:00", "lines": ["kept"]},
    ]))
    store.load()
    assert [t.lines for t in store] == [["kept"]]
