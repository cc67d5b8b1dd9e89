# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..views.pages import Page

logger = logging.getLogger(__name__)

PROMPTS = {
    Page.HOME: "home> ",
    Page.ADD_TASK: "new task> ",
    Page.TASKS: "tasks> ",
    Page.COMPLETED: "completed> ",
}


def handle_line(state: AppState, line: str) -> str | None:
    """
    Dispatch one input line. Returns text to print (may be empty), or None to stop.

    On the add-task page a plain line is the form submission; elsewhere it gets a hint.
    """
    text = line.strip()
    if not text:
        return ""

    if text.lower() in ("/exit", "/quit"):
        logger.info("Console exit command received.")
        return None

    try:
        cmd_response = command_registry.handle(state, text)
        if cmd_response is not None:
            return cmd_response

        if state.pages.current_page is Page.ADD_TASK:
            return state.pages.submit_add_task(text)
    except Exception:
        logger.exception("Command handler crashed on %r.", text)
        return "Internal error while handling a command (see log for details)."

    return "Not a command. Use /help to list commands, or /add to add a task."


def run_console_loop(state: AppState, *, read: Callable[[str], str] = input) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(state.settings, "app_name", "taskpad"))
    print(f"[{app_name}] Use /help for commands. Use /exit to quit.\n")
    print(state.pages.render())

    while state.running:
        try:
            line = read(PROMPTS.get(state.pages.current_page, "> "))
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        reply = handle_line(state, line)
        if reply is None:
            break
        if reply:
            print(reply)

    state.running = False
    logger.info("Console connector finished.")
