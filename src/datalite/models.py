"""
Pydantic models for script processing configuration.
"""

from pydantic import BaseModel, ConfigDict, Field


class ScriptOptions(BaseModel):
    """How raw script text is turned into statements

    Attributes:
        strip_comments: Remove ``--`` and ``/* */`` comments before splitting
        trim_lines: Collapse blank lines and trailing whitespace before splitting
        strict_keywords: Recognise BEGIN/END only as whole words
    """

    model_config = ConfigDict(frozen=True)

    strip_comments: bool = Field(default=True, description="Remove SQL comments")
    trim_lines: bool = Field(default=True, description="Normalise blank lines")
    strict_keywords: bool = Field(
        default=True, description="Match BEGIN/END as whole words only"
    )
