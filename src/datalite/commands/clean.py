"""
Clean Command

Produces the cleaned text of an SQL script: comments removed and blank
lines and trailing whitespace trimmed.
"""

from pathlib import Path

from datalite.commands._source import read_source
from datalite.core.sql_utils import remove_comments, trim_lines
from datalite.models import ScriptOptions


def clean_script(source: str | Path, options: ScriptOptions | None = None) -> str:
    """Return the cleaned text of a script

    Args:
        source: Script path, or "-" for stdin
        options: Which cleaning steps to apply (both by default)

    Returns:
        Cleaned script text

    Raises:
        ScriptLoadError: If the script cannot be read
    """
    options = options or ScriptOptions()
    text = read_source(source)

    if options.strip_comments:
        text = remove_comments(text)
    if options.trim_lines:
        text = trim_lines(text)
    return text
