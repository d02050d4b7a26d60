"""Shared script-source helper for commands (file path or stdin)."""

import sys
from pathlib import Path

from datalite.core.script import decode_script_text, read_script_text

STDIN_SOURCE = "-"


def read_source(source: str | Path, encoding: str = "utf-8") -> str:
    """Return the raw text of a script given as a path, or ``-`` for stdin."""
    if str(source) == STDIN_SOURCE:
        return decode_script_text(sys.stdin.buffer.read(), encoding, "<stdin>")
    return read_script_text(source, encoding=encoding)
