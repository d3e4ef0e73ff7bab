"""Local task-tracking backend on top of SQLite."""

__version__ = "0.1.0"
