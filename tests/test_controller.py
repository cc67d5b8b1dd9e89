# tests/test_controller.py

from __future__ import annotations

from taskpad.core.state import AppState
from taskpad.views.controller import CONFIRM_CLEAR, CONFIRM_DELETE
from taskpad.views.pages import EMPTY_STATE, Page

from .fakes import FakeConfirmer, FakeNotifier


def test_home_page_shows_counts(state: AppState) -> None:
    state.task_store.add_task("a")
    state.task_store.add_task("b")
    state.task_store.toggle_task_completion(1)

    out = state.pages.open(Page.HOME)
    assert "Total tasks: 2" in out
    assert "Completed:   1" in out
    assert "Pending:     1" in out


def test_empty_lists_show_empty_state(state: AppState) -> None:
    assert EMPTY_STATE in state.pages.open(Page.TASKS)
    assert EMPTY_STATE in state.pages.open(Page.COMPLETED)


def test_submit_add_task_success_navigates_to_tasks(state: AppState, notifier: FakeNotifier) -> None:
    state.pages.open(Page.ADD_TASK)
    out = state.pages.submit_add_task("Buy milk", "2024-01-01", "high")

    assert notifier.last is not None
    assert (notifier.last.kind, notifier.last.message) == ("success", "Task added successfully!")
    assert state.pages.current_page is Page.TASKS
    assert "#1 Buy milk" in out
    assert "due Jan 1, 2024" in out
    assert "High" in out
    assert "Completion Rate: 0%" in out


def test_submit_add_task_blank_reports_error(state: AppState, notifier: FakeNotifier) -> None:
    state.pages.open(Page.ADD_TASK)
    assert state.pages.submit_add_task("   ") == ""

    assert notifier.last is not None
    assert notifier.last.kind == "error"
    assert notifier.last.message == "Task text cannot be empty"
    assert state.pages.current_page is Page.ADD_TASK
    assert state.task_store.count_tasks() == 0


def test_toggle_notices_and_refreshes_stats(state: AppState, notifier: FakeNotifier) -> None:
    state.task_store.add_task("a")
    state.pages.open(Page.TASKS)

    out = state.pages.toggle(1)
    assert notifier.last is not None
    assert notifier.last.message == "Task marked as complete!"
    assert "Completion Rate: 100%" in out
    assert "[x] #1" in out

    state.pages.toggle(1)
    assert notifier.last.message == "Task marked as pending"


def test_toggle_on_home_page_does_not_rerender(state: AppState) -> None:
    state.task_store.add_task("a")
    state.pages.open(Page.HOME)
    assert state.pages.toggle(1) == ""


def test_toggle_unknown_reports_error(state: AppState, notifier: FakeNotifier) -> None:
    assert state.pages.toggle(42) == ""
    assert notifier.last is not None
    assert (notifier.last.kind, notifier.last.message) == ("error", "Task #42 not found")


def test_delete_asks_for_confirmation(
    state: AppState, notifier: FakeNotifier, confirmer: FakeConfirmer
) -> None:
    state.task_store.add_task("a")
    state.pages.open(Page.TASKS)

    out = state.pages.delete(1)

    assert confirmer.asked == [CONFIRM_DELETE]
    assert notifier.last is not None
    assert notifier.last.message == "Task deleted successfully!"
    assert state.task_store.count_tasks() == 0
    assert EMPTY_STATE in out


def test_delete_declined_keeps_task(
    state: AppState, notifier: FakeNotifier, confirmer: FakeConfirmer
) -> None:
    state.task_store.add_task("a")
    confirmer.answer = False

    assert state.pages.delete(1) == ""
    assert state.task_store.count_tasks() == 1
    assert notifier.last is not None
    assert notifier.last.kind == "info"


def test_delete_unknown_does_not_prompt(
    state: AppState, notifier: FakeNotifier, confirmer: FakeConfirmer
) -> None:
    state.pages.delete(5)
    assert confirmer.asked == []
    assert notifier.last is not None
    assert notifier.last.kind == "error"


def test_clear_completed_flow(
    state: AppState, notifier: FakeNotifier, confirmer: FakeConfirmer
) -> None:
    for text in ("a", "b", "c"):
        state.task_store.add_task(text)
    state.task_store.toggle_task_completion(1)
    state.task_store.toggle_task_completion(2)
    state.pages.open(Page.COMPLETED)

    out = state.pages.clear_completed()

    assert confirmer.asked == [CONFIRM_CLEAR]
    assert notifier.last is not None
    assert notifier.last.message == "Cleared 2 completed tasks"
    assert EMPTY_STATE in out
    assert [t.text for t in state.task_store.get_all_tasks()] == ["c"]


def test_clear_with_nothing_completed_skips_prompt(
    state: AppState, notifier: FakeNotifier, confirmer: FakeConfirmer
) -> None:
    state.task_store.add_task("a")
    assert state.pages.clear_completed() == ""
    assert confirmer.asked == []
    assert notifier.last is not None
    assert notifier.last.kind == "info"
