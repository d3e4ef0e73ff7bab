# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- opens the one store connection and creates the schema,
- wires it into AppState.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from ..config import get_settings
from ..core.errors import SchemaInitError
from ..core.state import AppState
from ..tasks.todo_schema import init_db
from ..tasks.todo_store import count_todos

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def open_store(db_path: str | Path) -> sqlite3.Connection:
    """
    Open the process-wide connection and make sure the schema exists.

    SchemaInitError propagates: the caller must abort startup.
    """
    try:
        conn = sqlite3.connect(str(db_path), check_same_thread=False)
    except sqlite3.Error as e:
        logger.exception("Failed to open todo store at %s", db_path)
        raise SchemaInitError(f"Failed to open todo store at {db_path}") from e

    conn.row_factory = sqlite3.Row
    try:
        init_db(conn)
    except Exception:
        conn.close()
        raise
    return conn


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    conn = open_store(settings.db_path)
    try:
        total = count_todos(conn)
    except Exception:
        conn.close()
        raise
    logger.info("Todo store ready db=%s total=%s", settings.db_path, total)

    return AppState(settings=settings, conn=conn)
