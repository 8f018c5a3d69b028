# tests/test_todo_api.py

from __future__ import annotations

import asyncio

import pytest

from todo_companion.core.state import AppState
from todo_companion.todos import todo_api
from todo_companion.todos.todo_client import FetchFailed, FetchOk
from todo_companion.todos.todo_models import FetchStatus, TodoFilter, TodoSort

from .fakes import FakeTodoSource, GatedTodoSource, remote


@pytest.mark.asyncio
async def test_refresh_success_replaces_store(state: AppState, source: FakeTodoSource) -> None:
    state.store.add("local only")
    source.results.append(FetchOk(data=[remote(5, "a"), remote(2, "b", True)]))

    result = await todo_api.refresh_todos(state)

    assert result.ok
    assert state.fetch_status is FetchStatus.SUCCEEDED
    assert state.fetch_error is None
    assert sorted(t.id for t in state.store.list_todos()) == [2, 5]

    added = todo_api.add_todo(state, "c")
    assert added is not None
    assert added.id == 6


@pytest.mark.asyncio
async def test_refresh_failure_keeps_store_and_records_error(
    state: AppState, source: FakeTodoSource
) -> None:
    state.store.add("still here")
    source.results.append(FetchFailed(message="HTTP 500", status=500))

    result = await todo_api.refresh_todos(state)

    assert not result.ok
    assert state.fetch_status is FetchStatus.FAILED
    assert state.fetch_error == "HTTP 500"
    assert [t.title for t in state.store.list_todos()] == ["still here"]
    assert todo_api.current_empty_text(state) == "HTTP 500"


@pytest.mark.asyncio
async def test_retry_after_failure_clears_error(state: AppState, source: FakeTodoSource) -> None:
    source.results.extend([FetchFailed(message="offline"), FetchOk(data=[remote(1, "a")])])

    await todo_api.refresh_todos(state)
    await todo_api.refresh_todos(state)

    assert source.calls == 2
    assert state.fetch_status is FetchStatus.SUCCEEDED
    assert state.fetch_error is None
    assert state.store.count_todos() == 1


@pytest.mark.asyncio
async def test_loading_status_visible_while_fetch_in_flight(state: AppState) -> None:
    gated = GatedTodoSource([FetchOk(data=[remote(1, "a")])])
    state.source = gated

    task = asyncio.create_task(todo_api.refresh_todos(state))
    await asyncio.sleep(0)

    assert state.fetch_status is FetchStatus.LOADING
    assert todo_api.current_empty_text(state) == "Loading..."
    # The store stays usable while the fetch is suspended.
    assert todo_api.add_todo(state, "during fetch") is not None

    gated.gates[0].set()
    await task

    assert state.fetch_status is FetchStatus.SUCCEEDED
    assert [t.title for t in state.store.list_todos()] == ["a"]


@pytest.mark.asyncio
async def test_overlapping_refreshes_last_to_finish_wins(state: AppState) -> None:
    gated = GatedTodoSource(
        [
            FetchOk(data=[remote(1, "first")]),
            FetchOk(data=[remote(2, "second")]),
        ]
    )
    state.source = gated

    first = asyncio.create_task(todo_api.refresh_todos(state))
    await asyncio.sleep(0)
    second = asyncio.create_task(todo_api.refresh_todos(state))
    await asyncio.sleep(0)

    # Release the later fetch first; the earlier one then lands last.
    gated.gates[1].set()
    await second
    gated.gates[0].set()
    await first

    assert [t.title for t in state.store.list_todos()] == ["first"]


def test_toggle_and_delete_via_state(state: AppState) -> None:
    todo = todo_api.add_todo(state, "Buy milk")
    assert todo is not None

    view = todo_api.current_view(state)
    assert (view.total, view.completed) == (1, 0)

    toggled = todo_api.toggle_todo(state, todo.id)
    assert toggled is not None and toggled.completed
    assert todo_api.current_view(state).completed == 1

    assert todo_api.delete_todo(state, todo.id) is True
    assert todo_api.current_view(state).total == 0
    assert todo_api.delete_todo(state, todo.id) is False


def test_edit_buffer_roundtrip(state: AppState) -> None:
    todo = todo_api.add_todo(state, "old title")
    assert todo is not None

    draft = todo_api.begin_edit(state, todo.id)
    assert draft is not None
    assert draft.text == "old title"

    todo_api.update_edit_text(state, "  new   title ")
    saved = todo_api.save_edit(state)

    assert saved is not None
    assert saved.title == "new title"
    assert state.ui.editing is None


def test_save_blank_draft_leaves_title(state: AppState) -> None:
    todo = todo_api.add_todo(state, "keep")
    assert todo is not None

    todo_api.begin_edit(state, todo.id)
    todo_api.update_edit_text(state, "   ")
    assert state.ui.editing is not None
    assert state.ui.editing.can_save is False

    assert todo_api.save_edit(state) is None
    assert state.store.get(todo.id).title == "keep"  # type: ignore[union-attr]


def test_begin_edit_unknown_id_and_cancel(state: AppState) -> None:
    assert todo_api.begin_edit(state, 99) is None
    assert state.ui.editing is None

    todo = todo_api.add_todo(state, "a")
    assert todo is not None
    todo_api.begin_edit(state, todo.id)
    todo_api.cancel_edit(state)
    assert state.ui.editing is None
    assert todo_api.save_edit(state) is None


def test_deleting_edited_todo_closes_draft(state: AppState) -> None:
    todo = todo_api.add_todo(state, "a")
    assert todo is not None
    todo_api.begin_edit(state, todo.id)

    todo_api.delete_todo(state, todo.id)

    assert state.ui.editing is None


def test_selections_drive_current_view(state: AppState) -> None:
    for title in ("a", "b", "c"):
        todo_api.add_todo(state, title)
    todo_api.toggle_todo(state, 2)

    assert todo_api.set_filter(state, "done") is TodoFilter.DONE
    assert [t.id for t in todo_api.current_view(state).todos] == [2]

    todo_api.set_filter(state, TodoFilter.ALL)
    assert todo_api.set_sort(state, "id") is TodoSort.ID
    assert [t.id for t in todo_api.current_view(state).todos] == [1, 2, 3]

    todo_api.set_sort(state, TodoSort.MOST_RECENT)
    assert [t.id for t in todo_api.current_view(state).todos] == [2, 3, 1]


def test_unknown_selection_keeps_previous(state: AppState) -> None:
    todo_api.set_filter(state, TodoFilter.ACTIVE)
    assert todo_api.set_filter(state, "bogus") is TodoFilter.ACTIVE
    assert todo_api.set_sort(state, "bogus") is TodoSort.MOST_RECENT
