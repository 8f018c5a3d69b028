# src/todo_companion/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (remote client, store).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState, UiSelection
from ..todos.todo_client import TodoApiClient
from ..todos.todo_store import TodoStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    source = TodoApiClient(
        settings.api_base_url,
        timeout_seconds=settings.api_timeout_seconds,
    )
    state = AppState(
        settings=settings,
        store=TodoStore(),
        source=source,
        ui=UiSelection(
            todo_filter=settings.default_filter,
            todo_sort=settings.default_sort,
        ),
    )
    logger.debug("AppState ready (remote=%s)", source.todos_url)
    return state
