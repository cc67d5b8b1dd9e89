# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Priority
from ..views.pages import Page, resolve_page

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("command name=%s args=%s", name, args)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str], usage: str) -> int | str:
    """Return the task id from args, or a usage string when it is missing or not a number."""
    if len(args) != 1:
        return usage
    raw = args[0].lstrip("#")
    try:
        task_id = int(raw)
    except ValueError:
        return f"Not a task id: {args[0]}. {usage}"
    if task_id < 1:
        return f"Not a task id: {args[0]}. {usage}"
    return task_id


ADD_USAGE = "Usage: /add <text> [--date YYYY-MM-DD] [--priority high|medium|low]"


def parse_add_args(args: list[str]) -> tuple[str, str | None, str | None] | str:
    """
    Split /add arguments into (text, date, priority).

    Returns a usage string on malformed options. The text itself may be empty;
    the store decides whether that is acceptable.
    """
    words: list[str] = []
    date: str | None = None
    priority: str | None = None

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ("--date", "-d", "--priority", "-p"):
            if i + 1 >= len(args):
                return f"Missing value for {arg}. {ADD_USAGE}"
            value = args[i + 1]
            if arg in ("--date", "-d"):
                date = value
            else:
                if value.lower() not in {p.value for p in Priority}:
                    return f"Unknown priority: {value}. {ADD_USAGE}"
                priority = value.lower()
            i += 2
            continue
        words.append(arg)
        i += 1

    return " ".join(words), date, priority


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_home(state: AppState, args: list[str]) -> str:
    return state.pages.open(Page.HOME)


def cmd_tasks(state: AppState, args: list[str]) -> str:
    return state.pages.open(Page.TASKS)


def cmd_completed(state: AppState, args: list[str]) -> str:
    return state.pages.open(Page.COMPLETED)


def cmd_open(state: AppState, args: list[str]) -> str:
    """
    /open <page>  -> home | add-task | tasks | completed (old *.html names work too)
    """
    if len(args) != 1:
        return "Usage: /open home|add-task|tasks|completed"
    page = resolve_page(args[0])
    if page is None:
        return f"Unknown page: {args[0]}. Pages: " + ", ".join(p.value for p in Page)
    return state.pages.open(page)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add                 -> open the add-task page
    /add <text> [opts]   -> add a task and go to the task list
    """
    if not args:
        return state.pages.open(Page.ADD_TASK)

    parsed = parse_add_args(args)
    if isinstance(parsed, str):
        return parsed
    text, date, priority = parsed
    return state.pages.submit_add_task(text, date, priority)


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args, "Usage: /toggle <id>")
    if isinstance(task_id, str):
        return task_id
    return state.pages.toggle(task_id)


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args, "Usage: /delete <id>")
    if isinstance(task_id, str):
        return task_id
    return state.pages.delete(task_id)


def cmd_clear(state: AppState, args: list[str]) -> str:
    return state.pages.clear_completed()


def cmd_stats(state: AppState, args: list[str]) -> str:
    return state.pages.stats()


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("home", cmd_home, help_text="Summary page (task counts).", aliases=["index"])
registry.register("add", cmd_add, help_text="Add a task: /add <text> [--date D] [--priority P].")
registry.register("tasks", cmd_tasks, help_text="List all tasks with stats.", aliases=["list", "ls"])
registry.register("completed", cmd_completed, help_text="List completed tasks.", aliases=["done"])
registry.register("open", cmd_open, help_text="Open a page: /open home|add-task|tasks|completed.")
registry.register("toggle", cmd_toggle, help_text="Mark a task complete/pending: /toggle <id>.", aliases=["t"])
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm", "del"])
registry.register("clear", cmd_clear, help_text="Delete all completed tasks.")
registry.register("stats", cmd_stats, help_text="Show completion statistics.")
