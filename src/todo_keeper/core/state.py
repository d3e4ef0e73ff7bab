# src/todo_keeper/core/state.py

from __future__ import annotations

import logging
import sqlite3
import threading
from dataclasses import dataclass, field

from ..tasks import todo_store
from ..tasks.todo_models import Todo

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Owns the single store connection for the process lifetime.

    Every call takes `lock` for its full duration, so callers from any thread
    are served one at a time. The connection must be opened with
    check_same_thread=False and already initialized (todo_schema.init_db).
    """

    # Store Settings on the state for easy access in command handlers.
    settings: object
    conn: sqlite3.Connection

    lock: threading.Lock = field(default_factory=threading.Lock)

    def get_todos(self) -> list[Todo]:
        with self.lock:
            return todo_store.get_todos(self.conn)

    def add_todo(self, title: str, deadline: str | None = None) -> Todo:
        with self.lock:
            return todo_store.add_todo(self.conn, title, deadline)

    def update_todo(
        self,
        todo_id: int,
        *,
        title: str | None = None,
        completed: bool | None = None,
        deadline: str | None = None,
    ) -> bool:
        with self.lock:
            return todo_store.update_todo(
                self.conn,
                todo_id,
                title=title,
                completed=completed,
                deadline=deadline,
            )

    def delete_todo(self, todo_id: int) -> bool:
        with self.lock:
            return todo_store.delete_todo(self.conn, todo_id)

    def count_todos(self) -> int:
        with self.lock:
            return todo_store.count_todos(self.conn)

    def close(self) -> None:
        with self.lock:
            self.conn.close()
        logger.debug("Store connection closed.")
