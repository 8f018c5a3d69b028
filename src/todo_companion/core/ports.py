# src/todo_companion/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The application state depends on Protocols instead of concrete classes, so
the remote listing and the store are swappable and tests can use fakes.
"""

from collections.abc import Iterable
from typing import Protocol

from ..todos.todo_client import NetworkResult
from ..todos.todo_models import RemoteTodo, TodoId, TodoItem


class TodoSource(Protocol):
    """Remote listing of todos (read-only)."""
    async def get_todos(self) -> NetworkResult: ...


class TodoRepo(Protocol):
    # Read API
    def get(self, todo_id: TodoId) -> TodoItem | None: ...
    def list_todos(self) -> tuple[TodoItem, ...]: ...
    def count_todos(self) -> int: ...

    # Mutations (invalid input is a silent no-op)
    def set_todos_from_api(self, remote_todos: Iterable[RemoteTodo]) -> int: ...
    def add(self, title: str) -> TodoItem | None: ...
    def toggle(self, todo_id: TodoId) -> TodoItem | None: ...
    def edit(self, todo_id: TodoId, title: str) -> TodoItem | None: ...
    def remove(self, todo_id: TodoId) -> bool: ...
