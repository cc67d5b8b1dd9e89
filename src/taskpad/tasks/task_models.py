# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_raw(cls, raw: Any) -> Priority:
        """Unknown, empty or missing priorities fall back to MEDIUM."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str) or not raw.strip():
            return cls.MEDIUM
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.MEDIUM


class InvalidTaskRecord(ValueError):
    """A stored record does not have the shape of a task."""


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool
    date: str | None
    priority: Priority
    created_at: str
    completed_at: str | None = None

    def to_record(self) -> dict[str, Any]:
        """Serialize with the storage field names (camelCase, as the stored array uses)."""
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "date": self.date,
            "priority": self.priority.value,
            "createdAt": self.created_at,
            "completedAt": self.completed_at,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from a stored record.

        Raises InvalidTaskRecord when required fields are missing or have the wrong type.
        Optional fields are tolerant: a missing completedAt is None, an unknown
        priority is MEDIUM.
        Text is trimmed and a pending task never keeps a completedAt.
        """
        if not isinstance(raw, dict):
            raise InvalidTaskRecord(f"record is not an object: {type(raw).__name__}")

        tid = raw.get("id")
        # bool is an int subclass; a boolean id is corrupt data.
        if not isinstance(tid, int) or isinstance(tid, bool) or tid < 1:
            raise InvalidTaskRecord(f"bad id: {tid!r}")

        text = raw.get("text")
        if not isinstance(text, str) or not text.strip():
            raise InvalidTaskRecord(f"bad text for id={tid}")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise InvalidTaskRecord(f"bad completed flag for id={tid}")

        date = raw.get("date")
        if date is not None and not isinstance(date, str):
            raise InvalidTaskRecord(f"bad date for id={tid}")

        created_at = raw.get("createdAt")
        if not isinstance(created_at, str):
            raise InvalidTaskRecord(f"bad createdAt for id={tid}")

        completed_at = raw.get("completedAt")
        if completed_at is not None and not isinstance(completed_at, str):
            raise InvalidTaskRecord(f"bad completedAt for id={tid}")

        return cls(
            id=tid,
            text=text.strip(),
            completed=completed,
            date=date or None,
            priority=Priority.from_raw(raw.get("priority")),
            created_at=created_at,
            completed_at=completed_at if completed else None,
        )


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int
    completion_rate: int  # integer percent in [0, 100]

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "completed": self.completed,
            "pending": self.pending,
            "completionRate": self.completion_rate,
        }
