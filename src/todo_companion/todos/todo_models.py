# todos/todo_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

TodoId = int


class TodoFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | None, default: TodoFilter | None = None) -> TodoFilter:
        fallback = cls.ALL if default is None else default
        if not raw:
            return fallback
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return fallback


class TodoSort(StrEnum):
    """
    Display order.

    Notes:
    - MOST_RECENT orders by updated_at, then created_at, then id (all descending).
    - ID is plain ascending id order.
    """

    MOST_RECENT = "most_recent"
    ID = "id"

    @classmethod
    def parse(cls, raw: str | None, default: TodoSort | None = None) -> TodoSort:
        fallback = cls.MOST_RECENT if default is None else default
        if not raw:
            return fallback
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return fallback


class FetchStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class TodoItem:
    """
    One todo record held by the store.

    created_at / updated_at are fixed-width UTC ISO strings, so plain string
    comparison is chronological.
    """

    id: TodoId
    title: str
    completed: bool
    created_at: str
    updated_at: str


@dataclass(slots=True, frozen=True)
class RemoteTodo:
    """A record as received from the remote listing (id is kept raw)."""

    id: Any
    title: str
    completed: bool
    user_id: Any = None

    @classmethod
    def from_api(cls, raw: dict[str, Any]) -> RemoteTodo:
        title = raw.get("title")
        return cls(
            id=raw.get("id"),
            title="" if title is None else str(title),
            completed=raw.get("completed") is True,
            user_id=raw.get("userId"),
        )


@dataclass(slots=True)
class EditDraft:
    id: TodoId
    text: str

    @property
    def can_save(self) -> bool:
        return bool(self.text.strip())
