"""SQLite execution backend."""

from .executor import SQLiteExecutor, open_connection

__all__ = ["SQLiteExecutor", "open_connection"]
