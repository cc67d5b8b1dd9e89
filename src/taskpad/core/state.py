# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..views.controller import PageController
from .ports import StorageBackend, TaskRepo


@dataclass
class AppState:
    """
    Shared application state for one session.

    settings is kept as Any so tests can pass a SimpleNamespace.
    """

    settings: Any
    storage: StorageBackend
    task_store: TaskRepo
    pages: PageController

    running: bool = True
