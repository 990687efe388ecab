"""
Parser settings.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_SEPARATOR = " "

FORBIDDEN_SEPARATORS = {
    "\\": "the escape character",
    "\n": "a line terminator",
    "\r": "a line terminator",
}


class ParserSettings(BaseModel):
    """
    Settings controlling how a document is parsed.

    Attributes:
        separator: Single character dividing a key from its value
        strict_mode: If True, treat warnings as errors
    """

    model_config = ConfigDict(frozen=True)

    separator: str = Field(DEFAULT_SEPARATOR, description="Key/value separator character")
    strict_mode: bool = Field(False, description="Treat warnings as errors")

    @field_validator('separator')
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separators are exactly one character and cannot clash with escapes or line breaks."""
        if len(v) != 1:
            raise ValueError(f"Separator must be a single character, got {v!r}")
        if v in FORBIDDEN_SEPARATORS:
            raise ValueError(f"Separator cannot be {FORBIDDEN_SEPARATORS[v]}")
        return v
