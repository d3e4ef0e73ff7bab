# tests/conftest.py

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.cli.bootstrap import create_initial_state
from todo_keeper.core.state import AppState
from todo_keeper.tasks.todo_schema import init_db


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and command handlers.

    A SimpleNamespace rather than the real config keeps tests away from the environment.
    """
    return SimpleNamespace(
        app_name="todo-keeper-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        db_path=tmp_path / "data" / "todos.db",
    )


@pytest.fixture()
def conn() -> Iterator[sqlite3.Connection]:
    c = sqlite3.connect(":memory:", check_same_thread=False)
    c.row_factory = sqlite3.Row
    init_db(c)
    yield c
    c.close()


@pytest.fixture()
def state(settings: SimpleNamespace) -> Iterator[AppState]:
    """AppState backed by a real SQLite file under tmp_path."""
    st = create_initial_state(settings=settings)
    yield st
    st.close()
