"""
Split Command

Splits an SQL script into the individual statements that would be executed.
"""

from pathlib import Path

from datalite.commands._source import read_source
from datalite.core.script import SQLScript
from datalite.models import ScriptOptions


def split_script(source: str | Path, options: ScriptOptions | None = None) -> list[str]:
    """Return the statements of a script, in order

    Raises:
        ScriptLoadError: If the script cannot be read
    """
    return list(SQLScript(read_source(source), options=options))
