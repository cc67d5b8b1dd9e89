# src/taskpad/views/formatting.py

"""Display helpers: dates, priority labels, ANSI styling."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..tasks.task_models import Priority

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
STRIKE = "\033[9m"

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"

PRIORITY_COLOR = {
    Priority.HIGH: RED,
    Priority.MEDIUM: YELLOW,
    Priority.LOW: CYAN,
}


def style(text: str, *codes: str, enabled: bool = True) -> str:
    if not enabled or not codes:
        return text
    return "".join(codes) + text + RESET


def _parse_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def format_date(value: Any) -> str:
    """
    "2024-01-01" -> "Jan 1, 2024".

    Empty values give "", values that are not dates are shown as-is.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        d = value.date()
    elif isinstance(value, date):
        d = value
    else:
        raw = str(value).strip()
        if not raw:
            return ""
        parsed = _parse_date(raw)
        if parsed is None:
            return raw
        d = parsed
    return f"{d:%b} {d.day}, {d.year}"


def priority_label(priority: Any) -> str:
    return Priority.from_raw(priority).value.capitalize()
