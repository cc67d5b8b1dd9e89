# src/taskpad/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console loop in the main thread.
"""

from __future__ import annotations

import logging
import signal
import sqlite3
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (storage=%s path=%s)...", settings.app_name, settings.storage_kind, settings.storage_path)

    try:
        state = create_initial_state(settings=settings)
    except (OSError, ValueError, sqlite3.Error):
        logger.exception("Failed to open task storage.")
        print(f"Could not open task storage at {settings.storage_path}. See the log for details.", file=sys.stderr)
        raise SystemExit(1)

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        state.running = False
        raise KeyboardInterrupt

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
    except (ValueError, OSError, AttributeError):
        # Not available on every platform / outside the main thread.
        pass

    try:
        run_console_loop(state)
    finally:
        # Every mutation is already persisted; nothing to flush here.
        logger.info("Bye.")


if __name__ == "__main__":
    main()
