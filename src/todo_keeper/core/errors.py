# src/todo_keeper/core/errors.py

from __future__ import annotations


class StoreError(RuntimeError):
    """A query against the todo store failed (I/O error, constraint violation, ...)."""


class SchemaInitError(StoreError):
    """The todo table could not be created. Startup cannot continue."""
