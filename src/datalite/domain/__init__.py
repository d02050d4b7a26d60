"""Domain-level error taxonomy and result envelopes."""

from .errors import DataLiteError, ScriptExecutionError, ScriptLoadError
from .results import CommandResult

__all__ = [
    "CommandResult",
    "DataLiteError",
    "ScriptExecutionError",
    "ScriptLoadError",
]
