"""Backend-agnostic execution contracts."""

from .executor import ExecutionConfig, ExecutionResult, SQLExecutor, StatementResult

__all__ = ["ExecutionConfig", "ExecutionResult", "SQLExecutor", "StatementResult"]
