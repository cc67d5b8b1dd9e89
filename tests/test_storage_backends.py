# tests/test_storage_backends.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from taskpad.storage.backends import JsonFileStorage, MemoryStorage, SqliteStorage, open_storage
from taskpad.tasks.task_store import TaskStore


@pytest.mark.parametrize("factory", ["json", "sqlite"])
def test_file_backends_persist_across_instances(tmp_path: Path, factory: str) -> None:
    path = tmp_path / ("kv.json" if factory == "json" else "kv.sqlite3")

    first = open_storage(factory, path)
    assert first.get_item("tasks") is None
    first.set_item("tasks", "[]")
    first.set_item("tasks", '[{"x": 1}]')
    first.set_item("other", "v")
    first.remove_item("other")

    second = open_storage(factory, path)
    assert second.get_item("tasks") == '[{"x": 1}]'
    assert second.get_item("other") is None


def test_memory_backend_is_per_instance() -> None:
    a = MemoryStorage()
    a.set_item("k", "v")
    assert a.get_item("k") == "v"
    assert MemoryStorage().get_item("k") is None
    a.remove_item("k")
    a.remove_item("missing")
    assert a.get_item("k") is None


def test_json_file_is_a_plain_object_with_no_temp_left(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasks.json"
    storage = JsonFileStorage(path)
    storage.set_item("tasks", "[]")

    assert json.loads(path.read_text("utf-8")) == {"tasks": "[]"}
    assert not path.with_suffix(".json.tmp").exists()


def test_json_file_unreadable_starts_empty(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("{broken", "utf-8")
    assert JsonFileStorage(path).get_item("tasks") is None

    path.write_text("[1, 2]", "utf-8")
    assert JsonFileStorage(path).get_item("tasks") is None


def test_sqlite_creates_parent_dirs(tmp_path: Path) -> None:
    path = tmp_path / "a" / "b" / "kv.sqlite3"
    storage = SqliteStorage(path)
    storage.set_item("k", "v")
    assert path.exists()


def test_open_storage_rejects_unknown_kind(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        open_storage("redis", tmp_path / "x")
    with pytest.raises(ValueError):
        open_storage("json", None)
    assert isinstance(open_storage("memory"), MemoryStorage)


@pytest.mark.parametrize("kind", ["json", "sqlite"])
def test_task_store_survives_restart(tmp_path: Path, kind: str) -> None:
    path = tmp_path / f"tasks.{kind}"

    store = TaskStore(open_storage(kind, path))
    store.add_task("persist me", "2024-03-04", "high")
    store.add_task("and me")
    store.toggle_task_completion(2)
    store.delete_task(1)

    reopened = TaskStore(open_storage(kind, path))
    tasks = reopened.get_all_tasks()
    assert [(t.id, t.text, t.completed) for t in tasks] == [(2, "and me", True)]
    assert reopened.add_task("next").id == 3


def test_json_file_failed_write_keeps_previous_value(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "tasks.json"
    storage = JsonFileStorage(path)
    storage.set_item("tasks", "[]")
    storage.set_item("other", "v")

    def refuse(src, dst) -> None:
        raise OSError("read-only filesystem")

    monkeypatch.setattr("taskpad.storage.backends.os.replace", refuse)
    with pytest.raises(OSError):
        storage.set_item("tasks", '[{"x": 1}]')
    with pytest.raises(OSError):
        storage.remove_item("other")

    assert storage.get_item("tasks") == "[]"
    assert storage.get_item("other") == "v"
    assert json.loads(path.read_text("utf-8")) == {"tasks": "[]", "other": "v"}
