# src/todo_companion/cli/commands.py

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..todos.todo_api import (
    add_todo,
    begin_edit,
    current_empty_text,
    current_view,
    delete_todo,
    refresh_todos,
    save_edit,
    set_filter,
    set_sort,
    toggle_todo,
    update_edit_text,
)
from ..todos.todo_client import FetchFailed
from ..todos.todo_models import TodoFilter, TodoItem, TodoSort

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_todo(todo: TodoItem) -> str:
    mark = "x" if todo.completed else " "
    return f"[{mark}] #{todo.id} {todo.title}"


def render_todos(state: AppState) -> str:
    view = current_view(state)
    header = (
        f"Todos: {view.completed}/{view.total} done "
        f"(filter={state.ui.todo_filter}, sort={state.ui.todo_sort})"
    )
    if not view.todos:
        return f"{header}\n  {current_empty_text(state)}"
    return "\n".join([header, *(f"  {format_todo(t)}" for t in view.todos)])


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_todos(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    todo = add_todo(state, " ".join(args))
    if todo is None:
        return "Usage: /add <title> (title must not be empty)."
    return f"Added {format_todo(todo)}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    todo_id = _parse_id(args)
    if todo_id is None:
        return "Usage: /toggle <id>."
    todo = toggle_todo(state, todo_id)
    if todo is None:
        return f"No todo with id {todo_id}."
    return f"Toggled {format_todo(todo)}"


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id>          -> show the current title as a draft
    /edit <id> <title>  -> replace the title
    """
    todo_id = _parse_id(args)
    if todo_id is None:
        return "Usage: /edit <id> [new title]."

    draft = begin_edit(state, todo_id)
    if draft is None:
        return f"No todo with id {todo_id}."

    if len(args) == 1:
        return f"Editing #{todo_id}: {draft.text}\nUse /edit {todo_id} <new title> to save."

    update_edit_text(state, " ".join(args[1:]))
    todo = save_edit(state)
    if todo is None:
        return f"Todo #{todo_id} was not changed."
    return f"Saved {format_todo(todo)}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    todo_id = _parse_id(args)
    if todo_id is None:
        return "Usage: /delete <id>."
    if not delete_todo(state, todo_id):
        return f"No todo with id {todo_id}."
    return f"Deleted #{todo_id}."


def cmd_filter(state: AppState, args: list[str]) -> str:
    choices = " | ".join(f.value for f in TodoFilter)
    if not args:
        return f"Filter is {state.ui.todo_filter}. Use /filter {choices}."
    if args[0].lower() not in {f.value for f in TodoFilter}:
        return f"Usage: /filter {choices}."
    set_filter(state, args[0])
    return render_todos(state)


def cmd_sort(state: AppState, args: list[str]) -> str:
    choices = " | ".join(s.value for s in TodoSort)
    if not args:
        return f"Sort is {state.ui.todo_sort}. Use /sort {choices}."
    if args[0].lower() not in {s.value for s in TodoSort}:
        return f"Usage: /sort {choices}."
    set_sort(state, args[0])
    return render_todos(state)


def cmd_retry(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit:
        with contextlib.suppress(Exception):
            emit("[API] Fetching todos...")

    result = asyncio.run(refresh_todos(state))
    if isinstance(result, FetchFailed):
        return f"Fetch failed: {result.message}. Use /retry to try again."
    return render_todos(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    base_url = getattr(state.settings, "api_base_url", "?")
    error = f" ({state.fetch_error})" if state.fetch_error else ""
    return (
        "Status:\n"
        f"  Remote: {base_url}\n"
        f"  Last fetch: {state.fetch_status}{error}\n"
        f"  Todos: {state.store.count_todos()}\n"
        f"  Filter/sort: {state.ui.todo_filter} / {state.ui.todo_sort}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show todos with current filter/sort.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a todo: /add <title>.")
registry.register("toggle", cmd_toggle, help_text="Toggle done/active: /toggle <id>.", aliases=["t"])
registry.register("edit", cmd_edit, help_text="Edit a title: /edit <id> [new title].")
registry.register("delete", cmd_delete, help_text="Delete a todo: /delete <id>.", aliases=["rm"])
registry.register("filter", cmd_filter, help_text="Filter: /filter all | active | done.")
registry.register("sort", cmd_sort, help_text="Sort: /sort most_recent | id.")
registry.register("retry", cmd_retry, help_text="Fetch todos from the remote listing again.")
registry.register("status", cmd_status, help_text="Show fetch status and settings.")
