# src/todo_companion/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, seeds the store from the remote
listing (optional), then runs the console REPL in the main thread.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..todos.todo_api import refresh_todos

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/todo")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger.info("Starting %s...", getattr(settings, "app_name", "todo"))

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    if settings.fetch_on_start:
        result = asyncio.run(refresh_todos(state))
        if not result.ok:
            logger.warning("Initial fetch failed; use /retry to try again.")

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
