# todos/todo_view.py

"""
View derivation.

Pure functions from (records, filter, sort) to what a screen should show.
Nothing here keeps a copy of store state: callers pass a fresh snapshot on
every read.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key

from .helpers import compare_iso_desc
from .todo_models import FetchStatus, TodoFilter, TodoItem, TodoSort

LOADING_TEXT = "Loading..."
EMPTY_STATE_TEXT = "No todos yet."
FALLBACK_ERROR_TEXT = "Error"


@dataclass(slots=True, frozen=True)
class TodoView:
    todos: tuple[TodoItem, ...]
    total: int
    completed: int


def filter_todos(items: Iterable[TodoItem], todo_filter: TodoFilter) -> list[TodoItem]:
    if todo_filter is TodoFilter.ACTIVE:
        return [t for t in items if not t.completed]
    if todo_filter is TodoFilter.DONE:
        return [t for t in items if t.completed]
    return list(items)


def _compare_most_recent(left: TodoItem, right: TodoItem) -> int:
    by_updated = compare_iso_desc(left.updated_at, right.updated_at)
    if by_updated != 0:
        return by_updated
    by_created = compare_iso_desc(left.created_at, right.created_at)
    if by_created != 0:
        return by_created
    # A bulk replace stamps a whole batch identically; id keeps the order total.
    return right.id - left.id


def sort_todos(items: Iterable[TodoItem], todo_sort: TodoSort) -> list[TodoItem]:
    if todo_sort is TodoSort.ID:
        return sorted(items, key=lambda t: t.id)
    return sorted(items, key=cmp_to_key(_compare_most_recent))


def count_completed(items: Iterable[TodoItem]) -> int:
    return sum(1 for t in items if t.completed)


def derive_todo_view(
    items: Sequence[TodoItem],
    todo_filter: TodoFilter = TodoFilter.ALL,
    todo_sort: TodoSort = TodoSort.MOST_RECENT,
) -> TodoView:
    """
    Build the display list plus counters.

    total/completed always describe the unfiltered list, matching the header
    counters, while todos is filtered and sorted.
    """
    visible = sort_todos(filter_todos(items, todo_filter), todo_sort)
    return TodoView(
        todos=tuple(visible),
        total=len(items),
        completed=count_completed(items),
    )


def list_empty_text(fetch_status: FetchStatus, fetch_error: str | None = None) -> str:
    """Text shown in place of an empty list."""
    if fetch_status is FetchStatus.LOADING:
        return LOADING_TEXT
    if fetch_status is FetchStatus.FAILED:
        return fetch_error or FALLBACK_ERROR_TEXT
    return EMPTY_STATE_TEXT
