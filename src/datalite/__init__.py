"""
DataLite

Python library and CLI for preparing SQL scripts for SQLite: comment
removal, blank-line trimming and statement splitting that respects string
literals and BEGIN...END trigger bodies.
"""

__version__ = "0.1.0"

from .core import SQLScript, remove_comments, split_statements, trim_lines
from .domain import CommandResult, DataLiteError, ScriptExecutionError, ScriptLoadError
from .models import ScriptOptions

__all__ = [
    "__version__",
    "remove_comments",
    "trim_lines",
    "split_statements",
    "SQLScript",
    "ScriptOptions",
    "CommandResult",
    "DataLiteError",
    "ScriptLoadError",
    "ScriptExecutionError",
]
