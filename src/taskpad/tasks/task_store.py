# src/taskpad/tasks/task_store.py

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone

from ..core.ports import StorageBackend
from .task_models import InvalidTaskRecord, Priority, Task, TaskStats

logger = logging.getLogger(__name__)

DEFAULT_KEY = "tasks"


class EmptyTextError(ValueError):
    """Raised by add_task when the task text is empty after trimming."""

    def __init__(self, message: str = "Task text cannot be empty") -> None:
        super().__init__(message)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(dt: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a Z suffix, e.g. 2024-01-01T12:00:00.000Z."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def completion_rate(completed: int, total: int) -> int:
    """Percent of completed tasks, rounded half-up; 0 for an empty collection."""
    if total <= 0:
        return 0
    return int(math.floor(completed * 100 / total + 0.5))


class TaskStore:
    """
    In-memory task collection backed by a key-value storage backend.

    Persistence:
    - the collection is read once, at construction
    - every mutation writes the whole collection (one JSON array) before returning;
      the in-memory list only changes once that write succeeded
    - the id counter lives under "<key>.nextId" and only ever grows

    Returned tasks are copies; mutate only through the store methods.
    """

    def __init__(
        self,
        backend: StorageBackend,
        *,
        key: str = DEFAULT_KEY,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._backend = backend
        self._key = key
        self._counter_key = f"{key}.nextId"
        self._now = now
        self._tasks: list[Task] = self._load()
        self._next_id = self._load_next_id()
        logger.info("TaskStore ready key=%s total=%s next_id=%s", key, len(self._tasks), self._next_id)

    # ---- loading ----

    def _load(self) -> list[Task]:
        raw = self._backend.get_item(self._key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Stored tasks under %r are not valid JSON; starting empty.", self._key)
            return []

        if not isinstance(data, list):
            logger.warning(
                "Stored tasks under %r are a %s, not a list; starting empty.",
                self._key,
                type(data).__name__,
            )
            return []

        tasks: list[Task] = []
        seen: set[int] = set()
        try:
            for rec in data:
                task = Task.from_record(rec)
                if task.id in seen:
                    raise InvalidTaskRecord(f"duplicate id {task.id}")
                seen.add(task.id)
                tasks.append(task)
        except InvalidTaskRecord as e:
            logger.warning("Stored tasks under %r failed validation (%s); starting empty.", self._key, e)
            return []

        return tasks

    def _load_next_id(self) -> int:
        floor_id = max((t.id for t in self._tasks), default=0) + 1

        raw = self._backend.get_item(self._counter_key)
        if raw is None:
            return floor_id
        try:
            stored = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Stored id counter %r is not valid JSON; deriving from tasks.", self._counter_key)
            return floor_id
        if not isinstance(stored, int) or isinstance(stored, bool):
            return floor_id
        return max(stored, floor_id)

    # ---- persistence ----

    def _save(self, tasks: list[Task]) -> None:
        payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False)
        self._backend.set_item(self._key, payload)

    def _save_counter(self, next_id: int) -> None:
        self._backend.set_item(self._counter_key, json.dumps(next_id))

    def _find_index(self, task_id: int) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return -1

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(
        self,
        text: str,
        date: str | None = None,
        priority: Priority | str | None = Priority.MEDIUM,
    ) -> Task:
        clean = (text or "").strip()
        if not clean:
            raise EmptyTextError()

        task = Task(
            id=self._next_id,
            text=clean,
            completed=False,
            date=date or None,
            priority=Priority.from_raw(priority),
            created_at=iso_timestamp(self._now()),
            completed_at=None,
        )
        # Counter first: a failure between the two writes can skip an id, never reuse one.
        self._save_counter(task.id + 1)
        self._next_id = task.id + 1

        tasks = [*self._tasks, task]
        self._save(tasks)
        self._tasks = tasks
        logger.debug("Task added id=%s priority=%s date=%s", task.id, task.priority.value, task.date)
        return replace(task)

    def get_all_tasks(self) -> list[Task]:
        return [replace(t) for t in self._tasks]

    def get_completed_tasks(self) -> list[Task]:
        return [replace(t) for t in self._tasks if t.completed]

    def get_pending_tasks(self) -> list[Task]:
        return [replace(t) for t in self._tasks if not t.completed]

    def get_task(self, task_id: int) -> Task | None:
        idx = self._find_index(task_id)
        return replace(self._tasks[idx]) if idx >= 0 else None

    def toggle_task_completion(self, task_id: int) -> Task | None:
        idx = self._find_index(task_id)
        if idx < 0:
            logger.debug("toggle_task_completion: id=%s not found", task_id)
            return None

        current = self._tasks[idx]
        completed = not current.completed
        task = replace(
            current,
            completed=completed,
            completed_at=iso_timestamp(self._now()) if completed else None,
        )
        tasks = [*self._tasks[:idx], task, *self._tasks[idx + 1 :]]
        self._save(tasks)
        self._tasks = tasks
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return replace(task)

    def delete_task(self, task_id: int) -> Task | None:
        idx = self._find_index(task_id)
        if idx < 0:
            logger.debug("delete_task: id=%s not found", task_id)
            return None

        removed = self._tasks[idx]
        tasks = [*self._tasks[:idx], *self._tasks[idx + 1 :]]
        self._save(tasks)
        self._tasks = tasks
        logger.debug("Task deleted id=%s", removed.id)
        return removed

    def clear_completed_tasks(self) -> list[Task]:
        removed = [t for t in self._tasks if t.completed]
        kept = [t for t in self._tasks if not t.completed]
        self._save(kept)
        self._tasks = kept
        logger.debug("Cleared %d completed tasks", len(removed))
        return removed

    def get_stats(self) -> TaskStats:
        total = len(self._tasks)
        completed = sum(1 for t in self._tasks if t.completed)
        return TaskStats(
            total=total,
            completed=completed,
            pending=total - completed,
            completion_rate=completion_rate(completed, total),
        )
