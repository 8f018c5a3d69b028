# tests/test_todo_view.py

from __future__ import annotations

from todo_companion.todos.todo_models import FetchStatus, TodoFilter, TodoItem, TodoSort
from todo_companion.todos.todo_view import (
    EMPTY_STATE_TEXT,
    LOADING_TEXT,
    derive_todo_view,
    filter_todos,
    list_empty_text,
    sort_todos,
)

T0 = "2026-01-01T00:00:00.000Z"
T1 = "2026-01-01T00:00:01.000Z"
T2 = "2026-01-01T00:00:02.000Z"


def item(
    todo_id: int,
    *,
    completed: bool = False,
    created_at: str = T0,
    updated_at: str | None = None,
) -> TodoItem:
    return TodoItem(
        id=todo_id,
        title=f"todo {todo_id}",
        completed=completed,
        created_at=created_at,
        updated_at=updated_at or created_at,
    )


def test_filter_active_and_done() -> None:
    items = [item(1, completed=False), item(2, completed=True)]

    assert filter_todos(items, TodoFilter.ACTIVE) == [items[0]]
    assert filter_todos(items, TodoFilter.DONE) == [items[1]]
    assert filter_todos(items, TodoFilter.ALL) == items


def test_most_recent_breaks_ties_by_id_desc() -> None:
    items = [item(1), item(2)]
    assert [t.id for t in sort_todos(items, TodoSort.MOST_RECENT)] == [2, 1]


def test_most_recent_uses_updated_then_created() -> None:
    items = [
        item(1, created_at=T0, updated_at=T2),
        item(2, created_at=T1, updated_at=T1),
        item(3, created_at=T0, updated_at=T1),
        item(4, created_at=T0, updated_at=T0),
    ]
    assert [t.id for t in sort_todos(items, TodoSort.MOST_RECENT)] == [1, 2, 3, 4]


def test_sort_by_id_ascending() -> None:
    items = [item(3, updated_at=T2), item(1), item(2, updated_at=T1)]
    assert [t.id for t in sort_todos(items, TodoSort.ID)] == [1, 2, 3]


def test_derive_view_counts_unfiltered_list() -> None:
    items = [item(1), item(2, completed=True), item(3, completed=True)]

    view = derive_todo_view(items, TodoFilter.ACTIVE, TodoSort.ID)

    assert [t.id for t in view.todos] == [1]
    assert view.total == 3
    assert view.completed == 2


def test_derive_view_does_not_touch_input() -> None:
    items = [item(2), item(1)]
    snapshot = list(items)

    derive_todo_view(items, TodoFilter.ALL, TodoSort.ID)

    assert items == snapshot


def test_list_empty_text() -> None:
    assert list_empty_text(FetchStatus.LOADING) == LOADING_TEXT
    assert list_empty_text(FetchStatus.FAILED, "HTTP 500") == "HTTP 500"
    assert list_empty_text(FetchStatus.FAILED, None) == "Error"
    assert list_empty_text(FetchStatus.SUCCEEDED) == EMPTY_STATE_TEXT
    assert list_empty_text(FetchStatus.IDLE) == EMPTY_STATE_TEXT
