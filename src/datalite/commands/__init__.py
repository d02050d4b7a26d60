"""
DataLite CLI Commands

Each command is implemented as a separate module; the CLI layer (cli.py)
acts as a thin routing layer.
"""

from .clean import clean_script
from .run import run_script
from .split import split_script

__all__ = [
    "clean_script",
    "run_script",
    "split_script",
]
