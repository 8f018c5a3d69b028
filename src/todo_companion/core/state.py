# src/todo_companion/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..todos.todo_models import EditDraft, FetchStatus, TodoFilter, TodoSort
from .ports import TodoRepo, TodoSource


@dataclass(slots=True)
class UiSelection:
    """Ephemeral per-screen choices; never part of the store."""

    todo_filter: TodoFilter = TodoFilter.ALL
    todo_sort: TodoSort = TodoSort.MOST_RECENT
    editing: EditDraft | None = None


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: object

    store: TodoRepo
    source: TodoSource

    ui: UiSelection = field(default_factory=UiSelection)

    # Status of the latest remote fetch (owned here, not by the store).
    fetch_status: FetchStatus = FetchStatus.IDLE
    fetch_error: str | None = None
