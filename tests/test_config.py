# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_keeper.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TODO_APP_NAME", "TODO_LOG_LEVEL", "TODO_DATA_DIR", "TODO_DB_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "todo-keeper"
    assert s.log_level == "INFO"
    assert s.data_dir == Path(".local/todo-keeper")
    assert s.db_path == Path(".local/todo-keeper") / "todos.db"


def test_db_path_follows_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    s = Settings.from_env()
    assert s.db_path == tmp_path / "todos.db"


def test_explicit_db_path_wins(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TODO_DB_PATH", str(tmp_path / "elsewhere.db"))
    monkeypatch.setenv("TODO_LOG_LEVEL", "DEBUG")
    s = Settings.from_env()
    assert s.db_path == tmp_path / "elsewhere.db"
    assert s.log_level == "DEBUG"


def test_blank_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_APP_NAME", "   ")
    monkeypatch.setenv("TODO_DB_PATH", "")
    s = Settings.from_env()
    assert s.app_name == "todo-keeper"
    assert s.db_path == s.data_dir / "todos.db"
