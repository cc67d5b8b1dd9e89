# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskpad.config import Settings
from taskpad.logging_setup import setup_logging


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "APP_NAME",
        "LOG_LEVEL",
        "COLOR",
        "STORAGE",
        "STORAGE_PATH",
        "STORAGE_KEY",
        "DATA_DIR",
        "CONFIRM_DESTRUCTIVE",
        "START_PAGE",
    ):
        monkeypatch.delenv(f"TASKPAD_{name}", raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()
    assert s.app_name == "taskpad"
    assert s.log_level == "WARNING"
    assert s.storage_kind == "json"
    assert s.storage_key == "tasks"
    assert s.data_dir == Path(".local/taskpad")
    assert s.storage_path == Path(".local/taskpad/tasks.json")
    assert s.confirm_destructive is True
    assert s.start_page == "home"


def test_env_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TASKPAD_STORAGE", "SQLite")
    clean_env.setenv("TASKPAD_DATA_DIR", str(tmp_path))
    clean_env.setenv("TASKPAD_CONFIRM_DESTRUCTIVE", "off")
    clean_env.setenv("TASKPAD_LOG_LEVEL", "debug")

    s = Settings.from_env()
    assert s.storage_kind == "sqlite"
    assert s.storage_path == tmp_path / "tasks.sqlite3"
    assert s.confirm_destructive is False
    assert s.log_level == "DEBUG"


def test_unknown_storage_kind_falls_back_to_json(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TASKPAD_STORAGE", "redis")
    assert Settings.from_env().storage_kind == "json"


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        log_file = setup_logging(log_dir=tmp_path)
        logging.getLogger("taskpad.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in log_file.read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
        logging.captureWarnings(False)
