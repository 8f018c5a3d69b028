# src/todo_companion/todos/todo_api.py

"""
High-level helpers over AppState.

These are what a screen (or the console connector) calls: they wire the
remote source, the store, the caller-owned fetch status and the edit buffer
together. Store rules (normalization, silent rejection) stay in the store.
"""

from __future__ import annotations

import logging

from ..core.state import AppState
from .todo_client import FetchFailed, NetworkResult
from .todo_models import EditDraft, FetchStatus, TodoFilter, TodoId, TodoItem, TodoSort
from .todo_view import TodoView, derive_todo_view, list_empty_text

logger = logging.getLogger(__name__)


async def refresh_todos(state: AppState) -> NetworkResult:
    """
    Fetch the remote listing and, on success, replace the store with it.

    Overlapping calls are not serialized: each completed fetch applies its own
    replace, so the last one to finish wins.
    """
    state.fetch_status = FetchStatus.LOADING
    state.fetch_error = None

    result = await state.source.get_todos()
    if isinstance(result, FetchFailed):
        state.fetch_error = result.message
        state.fetch_status = FetchStatus.FAILED
        logger.info("Refresh failed: %s (status=%s)", result.message, result.status)
        return result

    kept = state.store.set_todos_from_api(result.data)
    state.fetch_status = FetchStatus.SUCCEEDED
    logger.info("Refresh succeeded: %s todos", kept)
    return result


def add_todo(state: AppState, title: str) -> TodoItem | None:
    return state.store.add(title)


def toggle_todo(state: AppState, todo_id: TodoId) -> TodoItem | None:
    return state.store.toggle(todo_id)


def delete_todo(state: AppState, todo_id: TodoId) -> bool:
    removed = state.store.remove(todo_id)
    editing = state.ui.editing
    if removed and editing is not None and editing.id == todo_id:
        state.ui.editing = None
    return removed


# ---- edit buffer ----


def begin_edit(state: AppState, todo_id: TodoId) -> EditDraft | None:
    """Open an edit draft pre-filled with the current title (no-op for unknown ids)."""
    existing = state.store.get(todo_id)
    if existing is None:
        return None
    state.ui.editing = EditDraft(id=todo_id, text=existing.title)
    return state.ui.editing


def update_edit_text(state: AppState, text: str) -> None:
    if state.ui.editing is not None:
        state.ui.editing.text = text


def cancel_edit(state: AppState) -> None:
    state.ui.editing = None


def save_edit(state: AppState) -> TodoItem | None:
    """
    Commit the draft through the store and close it.

    A blank draft is rejected by the store, leaving the record unchanged.
    """
    draft = state.ui.editing
    if draft is None:
        return None
    updated = state.store.edit(draft.id, draft.text)
    state.ui.editing = None
    return updated


# ---- selections / derived view ----


def set_filter(state: AppState, todo_filter: TodoFilter | str) -> TodoFilter:
    if not isinstance(todo_filter, TodoFilter):
        todo_filter = TodoFilter.parse(todo_filter, default=state.ui.todo_filter)
    state.ui.todo_filter = todo_filter
    return todo_filter


def set_sort(state: AppState, todo_sort: TodoSort | str) -> TodoSort:
    if not isinstance(todo_sort, TodoSort):
        todo_sort = TodoSort.parse(todo_sort, default=state.ui.todo_sort)
    state.ui.todo_sort = todo_sort
    return todo_sort


def current_view(state: AppState) -> TodoView:
    return derive_todo_view(state.store.list_todos(), state.ui.todo_filter, state.ui.todo_sort)


def current_empty_text(state: AppState) -> str:
    return list_empty_text(state.fetch_status, state.fetch_error)
