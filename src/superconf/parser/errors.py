"""
Error types raised while parsing superconf documents.

Parsing is all-or-nothing: the first problem found aborts the pass and is
raised as a ParseError subclass carrying the line number and the offending
text, so callers can produce an actionable message.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of parse failure."""
    MALFORMED_KEY = "malformed_key"
    INDENTATION_MISMATCH = "indentation_mismatch"
    UNEXPECTED_NESTING = "unexpected_nesting"
    UNTERMINATED_ESCAPE = "unterminated_escape"
    DUPLICATE_KEY = "duplicate_key"
    STRICT_MODE = "strict_mode"


class ConfigurationError(Exception):
    """Raised when the parser itself is configured incorrectly."""
    pass


class ParseError(Exception):
    """
    Base class for all parse failures.

    Attributes:
        kind: Which failure this is
        message: Human-readable description without location
        line_number: 1-based line number, or None if not tied to a line
        line: Text of the offending line, if known
    """

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.message
        if self.line_number is not None:
            text = f"line {self.line_number}: {text}"
        if self.line is not None:
            text = f"{text}: {self.line!r}"
        return text

    def at_line(self, line_number: int, line: str) -> 'ParseError':
        """
        Attach location to an error raised without one.

        Errors that already carry a line number are returned unchanged.
        """
        if self.line_number is None:
            self.line_number = line_number
            self.line = line
            self.args = (self._format(),)
        return self


class MalformedKeyError(ParseError):
    """Key text is empty after trimming and escape resolution."""
    kind = ErrorKind.MALFORMED_KEY


class IndentationMismatchError(ParseError):
    """Indentation does not match any open block."""
    kind = ErrorKind.INDENTATION_MISMATCH


class UnexpectedNestingError(ParseError):
    """A line is indented under a key that already holds a scalar value."""
    kind = ErrorKind.UNEXPECTED_NESTING


class UnterminatedEscapeError(ParseError):
    """A line ends with a backslash that escapes nothing."""
    kind = ErrorKind.UNTERMINATED_ESCAPE


class DuplicateKeyError(ParseError):
    """The same key appears twice in one mapping."""
    kind = ErrorKind.DUPLICATE_KEY


class StrictModeError(ParseError):
    """Warnings were produced while parsing in strict mode."""
    kind = ErrorKind.STRICT_MODE
