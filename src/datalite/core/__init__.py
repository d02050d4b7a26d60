"""
Core Infrastructure

Text-only, database-agnostic building blocks:
- SQL utils: comment removal, line trimming and statement splitting
- Script: loading scripts and exposing them as statement sequences
"""

# Script exports
from .script import SQLScript, decode_script_text, read_script_text

# SQL utils exports
from .sql_utils import remove_comments, split_statements, trim_lines

__all__ = [
    # SQL utils
    "remove_comments",
    "split_statements",
    "trim_lines",
    # Script
    "SQLScript",
    "decode_script_text",
    "read_script_text",
]
