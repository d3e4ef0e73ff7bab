# src/todo_keeper/cli/commands.py

from __future__ import annotations

import json
import logging
from collections.abc import Callable

from ..core.errors import StoreError
from ..core.state import AppState
from ..tasks.todo_models import Todo

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry that marshals console input into the todo operations."""

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

    def handle(self, state: AppState, line: str) -> str | None:
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
            return handler(state, args)
        except StoreError as e:
            # Already logged with traceback by the store.
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        todo_id = int(args[0])
    except ValueError:
        return None
    return todo_id if todo_id > 0 else None


def _exists(state: AppState, todo_id: int) -> bool:
    # update_todo reports an attempt, not a match.
    return any(t.id == todo_id for t in state.get_todos())


def format_todo(todo: Todo) -> str:
    mark = "x" if todo.completed else " "
    due = f" (due {todo.deadline})" if todo.deadline else ""
    return f"[{mark}] {todo.id}. {todo.title}{due}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    todos = state.get_todos()
    if not todos:
        return "No todos."
    return "\n".join(format_todo(t) for t in todos)


def cmd_json(state: AppState, args: list[str]) -> str:
    return json.dumps([t.to_dict() for t in state.get_todos()], ensure_ascii=False, indent=2)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add Buy milk            -> no deadline
    /add Buy milk @2024-12-31 -> with deadline
    """
    deadline: str | None = None
    if args and args[-1].startswith("@") and len(args[-1]) > 1:
        deadline = args[-1][1:]
        args = args[:-1]

    title = " ".join(args).strip()
    if not title:
        return "Usage: /add <title> [@deadline]"

    todo = state.add_todo(title, deadline)
    logger.info("Added todo id=%s", todo.id)
    return f"Added: {format_todo(todo)}"


def _set_completed(state: AppState, args: list[str], completed: bool) -> str:
    todo_id = _parse_id(args)
    if todo_id is None:
        return "Usage: /done <id> or /undone <id>"
    if not _exists(state, todo_id):
        return f"No todo with id {todo_id}."
    state.update_todo(todo_id, completed=completed)
    return f"Todo {todo_id} marked {'done' if completed else 'not done'}."


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, True)


def cmd_undone(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, False)


def cmd_title(state: AppState, args: list[str]) -> str:
    todo_id = _parse_id(args)
    title = " ".join(args[1:]).strip()
    if todo_id is None or not title:
        return "Usage: /title <id> <new title>"
    if not _exists(state, todo_id):
        return f"No todo with id {todo_id}."
    state.update_todo(todo_id, title=title)
    return f"Todo {todo_id} renamed."


def cmd_deadline(state: AppState, args: list[str]) -> str:
    """
    /deadline 3 2024-12-31 -> set
    /deadline 3            -> clear
    """
    todo_id = _parse_id(args)
    if todo_id is None:
        return "Usage: /deadline <id> [value]"
    if not _exists(state, todo_id):
        return f"No todo with id {todo_id}."
    value = " ".join(args[1:]).strip()
    state.update_todo(todo_id, deadline=value)
    if not value:
        return f"Todo {todo_id} deadline cleared."
    return f"Todo {todo_id} deadline set to {value}."


def cmd_rm(state: AppState, args: list[str]) -> str:
    todo_id = _parse_id(args)
    if todo_id is None:
        return "Usage: /rm <id>"
    if state.delete_todo(todo_id):
        return f"Todo {todo_id} deleted."
    return f"No todo with id {todo_id}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="List all todos.", aliases=["ls"])
registry.register("json", cmd_json, help_text="Dump all todos as JSON.")
registry.register("add", cmd_add, help_text="Add a todo: /add <title> [@deadline].")
registry.register("done", cmd_done, help_text="Mark a todo completed: /done <id>.")
registry.register("undone", cmd_undone, help_text="Mark a todo not completed: /undone <id>.")
registry.register("title", cmd_title, help_text="Rename a todo: /title <id> <text>.")
registry.register(
    "deadline", cmd_deadline, help_text="Set or clear a deadline: /deadline <id> [value]."
)
registry.register("rm", cmd_rm, help_text="Delete a todo: /rm <id>.", aliases=["del"])
