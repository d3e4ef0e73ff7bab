# src/todo_keeper/tasks/todo_store.py

"""
SQLite todo repository.

Plain functions over an already initialized connection (see todo_schema.init_db).
They do no locking of their own: callers sharing one connection between threads
must serialize access (AppState does this).

Store failures are logged and re-raised as StoreError; a missing id is never an error.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime
from typing import Any

from ..core.errors import StoreError
from .todo_models import Todo

logger = logging.getLogger(__name__)

# Largest value SQLite can store in an INTEGER column; no row can have a bigger id.
_MAX_ROW_ID = 2**63 - 1


def _now_rfc3339() -> str:
    return datetime.now().astimezone().isoformat()


def get_todos(conn: sqlite3.Connection) -> list[Todo]:
    """Return every todo, oldest id first."""
    try:
        cur = conn.cursor()
        cur.row_factory = sqlite3.Row
        cur.execute(
            "SELECT id, title, completed, created_at, deadline FROM todos ORDER BY id ASC"
        )
        rows = cur.fetchall()
    except sqlite3.Error as e:
        logger.exception("Failed to list todos.")
        raise StoreError("Failed to list todos") from e
    return [Todo.from_row(r) for r in rows]


def add_todo(conn: sqlite3.Connection, title: str, deadline: str | None = None) -> Todo:
    created_at = _now_rfc3339()
    try:
        with conn:
            cur = conn.execute(
                "INSERT INTO todos (title, completed, created_at, deadline) VALUES (?, ?, ?, ?)",
                (title, False, created_at, deadline),
            )
    except sqlite3.Error as e:
        logger.exception("Failed to insert todo title=%r", title)
        raise StoreError("Failed to insert todo") from e

    rowid = cur.lastrowid
    if rowid is None:
        raise StoreError("SQLite did not return lastrowid for todos insert")

    todo = Todo(
        id=int(rowid),
        title=title,
        completed=False,
        created_at=created_at,
        deadline=deadline,
    )
    logger.debug("Todo added id=%s deadline=%s", todo.id, deadline)
    return todo


def update_todo(
    conn: sqlite3.Connection,
    todo_id: int,
    *,
    title: str | None = None,
    completed: bool | None = None,
    deadline: str | None = None,
) -> bool:
    """
    Partial update. Only supplied fields are touched.

    deadline="" clears the deadline (NULL); deadline=None leaves it alone.

    Returns True if any field was supplied, even when no row has this id.
    All supplied fields are written in a single transaction.
    """
    fields: list[str] = []
    params: list[Any] = []

    if title is not None:
        fields.append("title = ?")
        params.append(title)

    if completed is not None:
        fields.append("completed = ?")
        params.append(bool(completed))

    if deadline is not None:
        fields.append("deadline = ?")
        params.append(deadline or None)

    if not fields:
        return False

    if not 0 < todo_id <= _MAX_ROW_ID:
        return True

    params.append(int(todo_id))
    sql = f"UPDATE todos SET {', '.join(fields)} WHERE id = ?"

    try:
        with conn:
            cur = conn.execute(sql, params)
    except sqlite3.Error as e:
        logger.exception("Failed to update todo id=%s", todo_id)
        raise StoreError(f"Failed to update todo {todo_id}") from e

    logger.debug("Todo update id=%s fields=%s rows=%s", todo_id, fields, cur.rowcount)
    return True


def delete_todo(conn: sqlite3.Connection, todo_id: int) -> bool:
    """Return True only if a row was actually removed."""
    if not 0 < todo_id <= _MAX_ROW_ID:
        return False

    try:
        with conn:
            cur = conn.execute("DELETE FROM todos WHERE id = ?", (int(todo_id),))
    except sqlite3.Error as e:
        logger.exception("Failed to delete todo id=%s", todo_id)
        raise StoreError(f"Failed to delete todo {todo_id}") from e

    deleted = cur.rowcount > 0
    logger.debug("Todo delete id=%s deleted=%s", todo_id, deleted)
    return deleted


def count_todos(conn: sqlite3.Connection) -> int:
    try:
        (n,) = conn.execute("SELECT COUNT(*) FROM todos").fetchone()
    except sqlite3.Error as e:
        logger.exception("Failed to count todos.")
        raise StoreError("Failed to count todos") from e
    return int(n)
