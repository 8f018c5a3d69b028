# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_companion.core.state import AppState
from todo_companion.todos.todo_models import TodoFilter, TodoSort
from todo_companion.todos.todo_store import TodoStore

from .fakes import FakeClock, FakeTodoSource


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        api_base_url="https://todos.test",
        api_timeout_seconds=1.0,
        fetch_on_start=False,
        default_filter=TodoFilter.ALL,
        default_sort=TodoSort.MOST_RECENT,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TodoStore:
    return TodoStore(clock=clock)


@pytest.fixture()
def source() -> FakeTodoSource:
    return FakeTodoSource()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TodoStore, source: FakeTodoSource) -> AppState:
    """
    AppState wired with deterministic fakes.

    NOTE: the store is the real TodoStore (with a fake clock) because its
    behavior is part of what we want to test; only the remote source is faked.
    """
    return AppState(settings=settings, store=store, source=source)
