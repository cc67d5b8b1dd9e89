# src/taskpad/views/pages.py

"""
Page identities and text renderers.

Renderers are pure: they take store snapshots and return a string.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from ..tasks.task_models import Task, TaskStats
from .formatting import BOLD, DIM, GREEN, PRIORITY_COLOR, STRIKE, format_date, priority_label, style


class Page(StrEnum):
    HOME = "home"
    ADD_TASK = "add-task"
    TASKS = "tasks"
    COMPLETED = "completed"


# Old page filenames are accepted too, so bookmarks like "tasks.html" keep working.
_PAGE_ALIASES: dict[str, Page] = {
    "": Page.HOME,
    "index": Page.HOME,
    "index.html": Page.HOME,
    "home": Page.HOME,
    "add": Page.ADD_TASK,
    "add-task": Page.ADD_TASK,
    "add-task.html": Page.ADD_TASK,
    "tasks": Page.TASKS,
    "tasks.html": Page.TASKS,
    "list": Page.TASKS,
    "completed": Page.COMPLETED,
    "completed.html": Page.COMPLETED,
    "done": Page.COMPLETED,
}


def resolve_page(name: str | None) -> Page | None:
    """Map a page name or path ("/app/tasks.html") to a Page, or None if unknown."""
    if name is None:
        return None
    last = name.strip().rstrip("/").split("/")[-1]
    return _PAGE_ALIASES.get(last.lower())


PAGE_TITLES: dict[Page, str] = {
    Page.HOME: "Home",
    Page.ADD_TASK: "Add Task",
    Page.TASKS: "All Tasks",
    Page.COMPLETED: "Completed Tasks",
}

EMPTY_STATE = "No tasks found\nStart by adding some tasks!"

ADD_TASK_USAGE = (
    "Type the task text and press Enter, or use:\n"
    "  /add <text> [--date YYYY-MM-DD] [--priority high|medium|low]"
)


def render_header(page: Page, *, color: bool = True) -> str:
    title = PAGE_TITLES[page]
    return style(f"== {title} ==", BOLD, enabled=color)


def render_home(stats: TaskStats, *, color: bool = True) -> str:
    return "\n".join(
        [
            render_header(Page.HOME, color=color),
            f"Total tasks: {stats.total}",
            f"Completed:   {stats.completed}",
            f"Pending:     {stats.pending}",
        ]
    )


def render_stats(stats: TaskStats) -> str:
    return (
        f"Total Tasks: {stats.total} | Completed: {stats.completed} | "
        f"Pending: {stats.pending} | Completion Rate: {stats.completion_rate}%"
    )


def render_task(task: Task, *, color: bool = True) -> str:
    box = "[x]" if task.completed else "[ ]"
    text = style(task.text, STRIKE, DIM, enabled=color) if task.completed else task.text

    meta: list[str] = []
    if task.date:
        meta.append(f"due {format_date(task.date)}")
    meta.append(style(priority_label(task.priority), PRIORITY_COLOR[task.priority], enabled=color))

    mark = style(box, GREEN, enabled=color) if task.completed else box
    return f"{mark} #{task.id} {text}  ({', '.join(meta)})"


def render_task_list(tasks: Sequence[Task], *, color: bool = True) -> str:
    if not tasks:
        return EMPTY_STATE
    return "\n".join(render_task(t, color=color) for t in tasks)
