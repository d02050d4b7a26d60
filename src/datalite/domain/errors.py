"""Unified error taxonomy for script loading and execution."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class DataLiteError(Exception):
    """Base class for application-level failures."""

    message: str
    code: str

    def __str__(self) -> str:
        return self.message


class ScriptLoadError(DataLiteError):
    """Raised when a script cannot be read or decoded."""


@dataclass(slots=True)
class ScriptExecutionError(DataLiteError):
    """Raised when a statement of a script fails to execute.

    ``result`` holds the partial ExecutionResult up to and including the
    failed statement.
    """

    result: Any = field(default=None)
