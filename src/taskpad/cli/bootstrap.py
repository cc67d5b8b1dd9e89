# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the storage backend, task store and page controller into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Confirmer, Notifier
from ..core.state import AppState
from ..storage.backends import open_storage
from ..tasks.task_store import TaskStore
from ..views.controller import PageController
from ..views.notifications import AutoConfirmer, ConsoleConfirmer, ConsoleNotifier
from ..views.pages import Page, resolve_page

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.storage_kind != "memory":
        settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    notifier: Notifier | None = None,
    confirmer: Confirmer | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and console I/O ports) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = open_storage(settings.storage_kind, settings.storage_path)
    store = TaskStore(storage, key=settings.storage_key)

    if notifier is None:
        notifier = ConsoleNotifier(color=settings.color)
    if confirmer is None:
        confirmer = ConsoleConfirmer() if settings.confirm_destructive else AutoConfirmer()

    start_page = resolve_page(settings.start_page)
    if start_page is None:
        logger.warning("Unknown start page %r; using home.", settings.start_page)
        start_page = Page.HOME

    pages = PageController(
        store,
        notifier,
        confirmer,
        color=settings.color,
        start_page=start_page,
    )
    return AppState(settings=settings, storage=storage, task_store=store, pages=pages)
