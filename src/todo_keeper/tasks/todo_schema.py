# src/todo_keeper/tasks/todo_schema.py

from __future__ import annotations

import logging
import sqlite3

from ..core.errors import SchemaInitError

logger = logging.getLogger(__name__)


def init_db(conn: sqlite3.Connection) -> None:
    """
    Create the todos table if it is missing.

    Safe to call every time the store is opened. Any failure is fatal:
    nothing else in the app works without the table.
    """
    try:
        with conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    completed BOOLEAN NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL,
                    deadline TEXT
                )
                """
            )
    except sqlite3.Error as e:
        logger.exception("Failed to create todos table.")
        raise SchemaInitError("Failed to create todos table") from e
