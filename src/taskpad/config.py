# src/taskpad/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
- Settings are injected everywhere except the entrypoint.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPAD"

STORAGE_KINDS = ("json", "sqlite", "memory")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _default_storage_filename(kind: str) -> str:
    return "tasks.sqlite3" if kind == "sqlite" else "tasks.json"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    color: bool

    # ---- Storage ----
    data_dir: Path
    storage_kind: str
    storage_path: Path
    storage_key: str

    # ---- UI behaviour ----
    confirm_destructive: bool
    start_page: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskpad").strip() or "taskpad"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        color = _env_bool(_k("COLOR"), True)

        storage_kind = _env(_k("STORAGE"), "json").strip().lower() or "json"
        if storage_kind not in STORAGE_KINDS:
            storage_kind = "json"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskpad"))
        storage_path = _env_path(
            _k("STORAGE_PATH"), data_dir / _default_storage_filename(storage_kind)
        )
        storage_key = _env(_k("STORAGE_KEY"), "tasks").strip() or "tasks"

        confirm_destructive = _env_bool(_k("CONFIRM_DESTRUCTIVE"), True)
        start_page = _env(_k("START_PAGE"), "home").strip() or "home"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            color=color,
            data_dir=data_dir,
            storage_kind=storage_kind,
            storage_path=storage_path,
            storage_key=storage_key,
            confirm_destructive=confirm_destructive,
            start_page=start_page,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load .env (without overriding the real environment) and build Settings once."""
    load_dotenv(override=False)
    return Settings.from_env()
