# src/todo_keeper/tasks/todo_models.py

from __future__ import annotations

import sqlite3
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True)
class Todo:
    id: int
    title: str
    completed: bool
    created_at: str  # RFC 3339, local time with offset
    deadline: str | None = None

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> Todo:
        return cls(
            id=int(row["id"]),
            title=str(row["title"]),
            completed=bool(row["completed"]),
            created_at=str(row["created_at"]),
            deadline=row["deadline"],
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly shape handed to whatever renders todos."""
        return asdict(self)
