"""
Execution backends

Backends run the statements produced by SQLScript against a database.
"""

from .base import ExecutionConfig, ExecutionResult, SQLExecutor, StatementResult
from .sqlite import SQLiteExecutor, open_connection

__all__ = [
    "ExecutionConfig",
    "ExecutionResult",
    "SQLExecutor",
    "SQLiteExecutor",
    "StatementResult",
    "open_connection",
]
