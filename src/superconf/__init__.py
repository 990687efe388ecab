"""
superconf - Core Package

Parser for a line-oriented, indentation-nested key/value configuration
format. Documents parse into a tree of string keys mapped to scalar string
values or nested mappings.
"""

__version__ = "0.1.0"
__author__ = "SuperConf Team"

from .models import DEFAULT_SEPARATOR, Document, Entry, Nested, ParserSettings, Scalar
from .parser import (
    ConfigParser,
    ConfigurationError,
    DuplicateKeyError,
    ErrorKind,
    IndentationMismatchError,
    MalformedKeyError,
    ParseError,
    ParseResult,
    StrictModeError,
    UnexpectedNestingError,
    UnterminatedEscapeError,
    parse,
    parse_with_separator,
    validate,
)
from .tools import dumps, to_yaml

__all__ = [
    'parse',
    'parse_with_separator',
    'validate',
    'dumps',
    'to_yaml',
    'ConfigParser',
    'ParseResult',
    'Document',
    'Entry',
    'Nested',
    'Scalar',
    'ParserSettings',
    'DEFAULT_SEPARATOR',
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
