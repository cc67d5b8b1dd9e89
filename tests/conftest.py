# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.state import AppState
from taskpad.tasks.task_store import TaskStore
from taskpad.views.controller import PageController

from .fakes import FakeClock, FakeConfirmer, FakeNotifier, RecordingStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="WARNING",
        color=False,
        data_dir=tmp_path,
        storage_kind="json",
        storage_path=tmp_path / "tasks.json",
        storage_key="tasks",
        confirm_destructive=True,
        start_page="home",
    )


@pytest.fixture()
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(storage: RecordingStorage, clock: FakeClock) -> TaskStore:
    return TaskStore(storage, now=clock)


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def confirmer() -> FakeConfirmer:
    return FakeConfirmer()


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    storage: RecordingStorage,
    store: TaskStore,
    notifier: FakeNotifier,
    confirmer: FakeConfirmer,
) -> AppState:
    """
    AppState wired with an in-memory backend and recording console fakes.
    """
    pages = PageController(store, notifier, confirmer, color=False)
    return AppState(settings=settings, storage=storage, task_store=store, pages=pages)
