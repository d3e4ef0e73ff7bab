"""
Todo subsystem.

Components:
- todo_models.py: data structure (Todo)
- todo_schema.py: idempotent schema creation
- todo_store.py: SQLite-backed list/add/update/delete
"""
