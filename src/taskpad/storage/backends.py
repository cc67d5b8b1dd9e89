# src/taskpad/storage/backends.py

"""
Key-value storage backends for the task store.

All of them implement core.ports.StorageBackend (get_item / set_item / remove_item)
with string values, the same contract browser localStorage offers.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import sqlite3
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage:
    """
    All keys kept in a single JSON object file.

    Reads happen once, at construction; each write rewrites the whole file
    via a temp file + os.replace so a crash never leaves a half-written file.
    The cached keys only change once the file write succeeded.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._data: dict[str, str] = self._read()
        logger.info("JsonFileStorage ready path=%s keys=%d", self._path, len(self._data))

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data: Any = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to read storage file %s; starting empty.", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a JSON object; starting empty.", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self, data: dict[str, str]) -> None:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        data = {**self._data, key: str(value)}
        self._flush(data)
        self._data = data

    def remove_item(self, key: str) -> None:
        if key not in self._data:
            return
        data = {k: v for k, v in self._data.items() if k != key}
        self._flush(data)
        self._data = data


class SqliteStorage:
    """
    SQLite key-value table.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        logger.info("SqliteStorage ready db=%s", self._db_path)

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    def get_item(self, key: str) -> str | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
            return str(row[0]) if row else None
        finally:
            conn.close()

    def set_item(self, key: str, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, str(value)),
            )
            conn.commit()
        finally:
            conn.close()

    def remove_item(self, key: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()


def open_storage(kind: str, path: str | Path | None = None):
    """Build a backend by name: json | sqlite | memory."""
    k = (kind or "").strip().lower()
    if k == "memory":
        return MemoryStorage()
    if k in ("json", "sqlite"):
        if path is None:
            raise ValueError(f"storage kind {k!r} needs a path")
        return JsonFileStorage(path) if k == "json" else SqliteStorage(path)
    raise ValueError(f"unknown storage kind: {kind!r}")
