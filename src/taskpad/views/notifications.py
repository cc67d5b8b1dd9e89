# src/taskpad/views/notifications.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from enum import StrEnum
from typing import TextIO

from .formatting import BOLD, CYAN, GREEN, RED, YELLOW, style

logger = logging.getLogger(__name__)


class NoticeKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"

    @classmethod
    def from_raw(cls, raw: object) -> NoticeKind:
        try:
            return cls(str(raw))
        except ValueError:
            return cls.INFO


_KIND_COLOR = {
    NoticeKind.SUCCESS: GREEN,
    NoticeKind.ERROR: RED,
    NoticeKind.INFO: CYAN,
    NoticeKind.WARNING: YELLOW,
}


class ConsoleNotifier:
    """Prints one tagged line per notice, e.g. "[success] Task added successfully!"."""

    def __init__(self, *, stream: TextIO | None = None, color: bool = True) -> None:
        self._stream = stream
        self._color = color

    def notify(self, message: str, kind: NoticeKind | str = NoticeKind.INFO) -> None:
        k = NoticeKind.from_raw(kind)
        tag = style(f"[{k.value}]", BOLD, _KIND_COLOR[k], enabled=self._color)
        stream = self._stream or sys.stdout
        print(f"{tag} {message}", file=stream, flush=True)
        logger.debug("notice kind=%s message=%s", k.value, message)


class ConsoleConfirmer:
    """
    y/N prompt before destructive actions.

    EOF or Ctrl+C at the prompt counts as "no".
    """

    def __init__(self, *, ask: Callable[[str], str] = input) -> None:
        self._ask = ask

    def confirm(self, message: str) -> bool:
        try:
            answer = self._ask(f"{message} [y/N] ")
        except (EOFError, KeyboardInterrupt):
            print()
            return False
        return answer.strip().lower() in {"y", "yes"}


class AutoConfirmer:
    """Accepts every confirmation (TASKPAD_CONFIRM_DESTRUCTIVE=false)."""

    def confirm(self, message: str) -> bool:
        logger.debug("auto-confirmed: %s", message)
        return True
