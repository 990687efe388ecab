"""
Parsing engine for superconf documents.

This package provides the line classifier, escape resolution, separator
splitting and indentation-driven tree building, together with the
ConfigParser front end and its error types.
"""

from .errors import (
    ConfigurationError,
    DuplicateKeyError,
    ErrorKind,
    IndentationMismatchError,
    MalformedKeyError,
    ParseError,
    StrictModeError,
    UnexpectedNestingError,
    UnterminatedEscapeError,
)
from .parser import (
    ConfigParser,
    ParseResult,
    parse,
    parse_with_separator,
    validate,
)

__all__ = [
    'ConfigParser',
    'ParseResult',
    'parse',
    'parse_with_separator',
    'validate',
    'ConfigurationError',
    'DuplicateKeyError',
    'ErrorKind',
    'IndentationMismatchError',
    'MalformedKeyError',
    'ParseError',
    'StrictModeError',
    'UnexpectedNestingError',
    'UnterminatedEscapeError',
]
