# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store and the views depend on Protocols instead of concrete implementations.
This keeps storage backends and console I/O swappable and makes testing easier.
"""

from typing import Any, Protocol


class StorageBackend(Protocol):
    """
    Key-value persistence substrate (the localStorage contract).

    Values are strings; the caller owns serialization.
    get_item returns None when the key is absent.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class TaskRepo(Protocol):
    # Queries
    def get_all_tasks(self) -> list[Any]: ...
    def get_completed_tasks(self) -> list[Any]: ...
    def get_pending_tasks(self) -> list[Any]: ...
    def get_task(self, task_id: int) -> Any | None: ...
    def get_stats(self) -> Any: ...
    def count_tasks(self) -> int: ...

    # Mutations (each one persists the whole collection before returning)
    def add_task(self, text: str, date: str | None = None, priority: Any = "medium") -> Any: ...
    def toggle_task_completion(self, task_id: int) -> Any | None: ...
    def delete_task(self, task_id: int) -> Any | None: ...
    def clear_completed_tasks(self) -> list[Any]: ...


class Notifier(Protocol):
    """Transient user-facing notices. kind is one of success/error/info/warning."""

    def notify(self, message: str, kind: Any = "info") -> None: ...


class Confirmer(Protocol):
    """Asks the user to confirm a destructive action."""

    def confirm(self, message: str) -> bool: ...

