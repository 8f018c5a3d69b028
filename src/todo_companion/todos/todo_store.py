# todos/todo_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace

from .helpers import coerce_todo_id, next_todo_id_from_existing, normalize_title, now_iso
from .todo_models import RemoteTodo, TodoId, TodoItem

logger = logging.getLogger(__name__)


class TodoStore:
    """
    In-memory todo store: the single source of truth for todo records.

    State:
    - an insertion-ordered mapping id -> TodoItem (newest local adds first)
    - the next id handed out by add()

    Mutations are synchronous and replace records wholesale, so a reader never
    observes a half-applied change. Invalid input (blank title, unknown id) is
    a silent no-op: the method returns None/False and nothing changes.
    """

    def __init__(self, *, clock: Callable[[], str] = now_iso) -> None:
        self._clock = clock
        self._items: dict[TodoId, TodoItem] = {}
        self._next_id: TodoId = 1

    # ---- read API ----

    @property
    def next_id(self) -> TodoId:
        return self._next_id

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, todo_id: object) -> bool:
        return todo_id in self._items

    def count_todos(self) -> int:
        return len(self._items)

    def get(self, todo_id: TodoId) -> TodoItem | None:
        return self._items.get(todo_id)

    def list_todos(self) -> tuple[TodoItem, ...]:
        """Snapshot of all records in store order."""
        return tuple(self._items.values())

    # ---- mutations ----

    def _touch(self, existing: TodoItem) -> str:
        # A wall clock stepping backwards must not put updated_at before created_at.
        return max(self._clock(), existing.created_at)

    def set_todos_from_api(self, remote_todos: Iterable[RemoteTodo]) -> int:
        """
        Replace every record with the remote listing.

        One timestamp is captured for the whole batch, so all records share
        created_at == updated_at and "most recent" ordering falls back to id.
        Records that cannot satisfy the store invariants (no integer id, blank
        title, repeated id) are skipped. Returns the number of records kept.
        """
        timestamp = self._clock()
        items: dict[TodoId, TodoItem] = {}
        raw_ids: list[object] = []

        for remote in remote_todos:
            raw_ids.append(remote.id)

            todo_id = coerce_todo_id(remote.id)
            if todo_id is None:
                logger.warning("Skipping remote todo with invalid id=%r", remote.id)
                continue

            title = normalize_title(remote.title)
            if not title:
                logger.warning("Skipping remote todo id=%s with blank title", todo_id)
                continue

            if todo_id in items:
                logger.warning("Skipping duplicate remote todo id=%s", todo_id)
                continue

            items[todo_id] = TodoItem(
                id=todo_id,
                title=title,
                completed=bool(remote.completed),
                created_at=timestamp,
                updated_at=timestamp,
            )

        self._items = items
        self._next_id = next_todo_id_from_existing(raw_ids)
        logger.info(
            "TodoStore replaced from remote: kept=%s received=%s next_id=%s",
            len(items),
            len(raw_ids),
            self._next_id,
        )
        return len(items)

    def add(self, title: str) -> TodoItem | None:
        normalized = normalize_title(title)
        if not normalized:
            logger.debug("Todo add ignored: blank title")
            return None

        timestamp = self._clock()
        todo = TodoItem(
            id=self._next_id,
            title=normalized,
            completed=False,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self._next_id += 1
        # New records go to the front of the order.
        self._items = {todo.id: todo, **self._items}
        logger.debug("Todo added id=%s next_id=%s", todo.id, self._next_id)
        return todo

    def toggle(self, todo_id: TodoId) -> TodoItem | None:
        existing = self._items.get(todo_id)
        if existing is None:
            logger.debug("Todo toggle ignored: unknown id=%s", todo_id)
            return None

        updated = replace(
            existing, completed=not existing.completed, updated_at=self._touch(existing)
        )
        self._items[todo_id] = updated
        logger.debug("Todo toggled id=%s completed=%s", todo_id, updated.completed)
        return updated

    def edit(self, todo_id: TodoId, title: str) -> TodoItem | None:
        normalized = normalize_title(title)
        if not normalized:
            logger.debug("Todo edit ignored: blank title id=%s", todo_id)
            return None

        existing = self._items.get(todo_id)
        if existing is None:
            logger.debug("Todo edit ignored: unknown id=%s", todo_id)
            return None

        updated = replace(existing, title=normalized, updated_at=self._touch(existing))
        self._items[todo_id] = updated
        logger.debug("Todo edited id=%s", todo_id)
        return updated

    def remove(self, todo_id: TodoId) -> bool:
        """Delete a record. The id is never handed out again by add()."""
        if self._items.pop(todo_id, None) is None:
            logger.debug("Todo remove ignored: unknown id=%s", todo_id)
            return False
        logger.debug("Todo removed id=%s", todo_id)
        return True
