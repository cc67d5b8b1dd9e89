# src/taskpad/views/controller.py

"""
Page controller: the command handlers behind every page.

Each handler reads or mutates the task repo, emits notices through the
Notifier port and returns the text to display (possibly "").
Destructive actions go through the Confirmer port first.
"""

from __future__ import annotations

import logging

from ..core.ports import Confirmer, Notifier, TaskRepo
from ..tasks.task_store import EmptyTextError
from .notifications import NoticeKind
from .pages import (
    ADD_TASK_USAGE,
    Page,
    render_header,
    render_home,
    render_stats,
    render_task_list,
)

logger = logging.getLogger(__name__)

CONFIRM_DELETE = "Are you sure you want to delete this task?"
CONFIRM_CLEAR = "Are you sure you want to clear all completed tasks?"


class PageController:
    def __init__(
        self,
        repo: TaskRepo,
        notifier: Notifier,
        confirmer: Confirmer,
        *,
        color: bool = True,
        start_page: Page = Page.HOME,
    ) -> None:
        self.repo = repo
        self.notifier = notifier
        self.confirmer = confirmer
        self.color = color
        self.current_page = start_page

    # ---- rendering ----

    def open(self, page: Page) -> str:
        """Navigate to a page and render it."""
        self.current_page = page
        logger.debug("open page=%s", page.value)
        return self.render()

    def render(self) -> str:
        page = self.current_page
        header = render_header(page, color=self.color)

        if page is Page.HOME:
            return render_home(self.repo.get_stats(), color=self.color)

        if page is Page.ADD_TASK:
            return f"{header}\n{ADD_TASK_USAGE}"

        if page is Page.TASKS:
            stats = render_stats(self.repo.get_stats())
            tasks = render_task_list(self.repo.get_all_tasks(), color=self.color)
            return f"{header}\n{stats}\n\n{tasks}"

        tasks = render_task_list(self.repo.get_completed_tasks(), color=self.color)
        return f"{header}\n{tasks}"

    def _refresh(self) -> str:
        # Only list pages show task state that a mutation can change.
        if self.current_page in (Page.TASKS, Page.COMPLETED):
            return self.render()
        return ""

    # ---- add-task form ----

    def submit_add_task(
        self,
        text: str,
        date: str | None = None,
        priority: str | None = None,
    ) -> str:
        try:
            task = self.repo.add_task(text, date or None, priority or "medium")
        except EmptyTextError as e:
            self.notifier.notify(str(e), NoticeKind.ERROR)
            return ""

        logger.info("Task added id=%s", task.id)
        self.notifier.notify("Task added successfully!", NoticeKind.SUCCESS)
        return self.open(Page.TASKS)

    # ---- list actions ----

    def toggle(self, task_id: int) -> str:
        task = self.repo.toggle_task_completion(task_id)
        if task is None:
            self.notifier.notify(f"Task #{task_id} not found", NoticeKind.ERROR)
            return ""

        msg = "Task marked as complete!" if task.completed else "Task marked as pending"
        self.notifier.notify(msg, NoticeKind.SUCCESS)
        return self._refresh()

    def delete(self, task_id: int) -> str:
        if self.repo.get_task(task_id) is None:
            self.notifier.notify(f"Task #{task_id} not found", NoticeKind.ERROR)
            return ""

        if not self.confirmer.confirm(CONFIRM_DELETE):
            self.notifier.notify("Delete cancelled.", NoticeKind.INFO)
            return ""

        removed = self.repo.delete_task(task_id)
        if removed is None:
            self.notifier.notify(f"Task #{task_id} not found", NoticeKind.ERROR)
            return ""

        logger.info("Task deleted id=%s", removed.id)
        self.notifier.notify("Task deleted successfully!", NoticeKind.SUCCESS)
        return self._refresh()

    def clear_completed(self) -> str:
        if not self.repo.get_completed_tasks():
            self.notifier.notify("No completed tasks to clear.", NoticeKind.INFO)
            return ""

        if not self.confirmer.confirm(CONFIRM_CLEAR):
            self.notifier.notify("Clear cancelled.", NoticeKind.INFO)
            return ""

        removed = self.repo.clear_completed_tasks()
        logger.info("Cleared %d completed tasks", len(removed))
        self.notifier.notify(f"Cleared {len(removed)} completed tasks", NoticeKind.SUCCESS)
        return self._refresh()

    def stats(self) -> str:
        return render_stats(self.repo.get_stats())
