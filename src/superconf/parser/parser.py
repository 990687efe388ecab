"""
Parser for superconf documents.

This module ties the line classifier, separator splitter and tree builder
into a single pass over already-loaded text. It provides the ConfigParser
class, which reports non-fatal warnings and supports a strict mode, and the
module-level ``parse`` / ``parse_with_separator`` convenience functions.

Parsing holds no state between calls, so a parser instance may be shared
between threads.
"""

import logging
from dataclasses import dataclass
from typing import List

from pydantic import ValidationError

from ..models.document import Document
from ..models.settings import DEFAULT_SEPARATOR, ParserSettings
from .builder import TreeBuilder
from .errors import ConfigurationError, ParseError, StrictModeError
from .lines import iter_lines
from .splitter import split_body


logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """
    Result of a parse operation.

    Attributes:
        document: The parsed document
        warnings: List of non-fatal warnings
        separator: Separator the document was parsed with
        line_count: Number of physical lines read
    """
    document: Document
    warnings: List[str]
    separator: str
    line_count: int


class ConfigParser:
    """
    Parser turning superconf text into a Document.

    Each call to ``parse`` is a single forward pass: lines are classified,
    content lines are split into key and value, and the tree builder nests
    them by indentation. The first error aborts the pass; no partial
    document is ever returned.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR, strict_mode: bool = False):
        """
        Initialize the parser.

        Args:
            separator: Single character dividing keys from values
            strict_mode: If True, treat warnings as errors

        Raises:
            ConfigurationError: If the separator is not usable
        """
        try:
            self.settings = ParserSettings(separator=separator, strict_mode=strict_mode)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid parser settings: {e}") from e
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def separator(self) -> str:
        return self.settings.separator

    @property
    def strict_mode(self) -> bool:
        return self.settings.strict_mode

    def parse(self, text: str) -> ParseResult:
        """
        Parse a document.

        Args:
            text: Full document text

        Returns:
            ParseResult containing the document and any warnings

        Raises:
            ParseError: If the text is malformed, or produced warnings in
                strict mode
        """
        builder = TreeBuilder()
        line_count = 0

        for line in iter_lines(text):
            line_count += 1
            if not line.is_content:
                continue
            try:
                split = split_body(line.body, self.separator)
                builder.feed(line, split)
            except ParseError as e:
                raise e.at_line(line.number, line.raw)

        document = builder.finish()
        warnings = list(builder.warnings)

        if self.strict_mode and warnings:
            raise StrictModeError(f"Warnings in strict mode: {'; '.join(warnings)}")

        self.logger.info(f"Parsed {len(document)} top-level keys from {line_count} lines with {len(warnings)} warnings")

        return ParseResult(
            document=document,
            warnings=warnings,
            separator=self.separator,
            line_count=line_count,
        )

    def parse_document(self, text: str) -> Document:
        """Parse a document, discarding warnings."""
        return self.parse(text).document

    def validate(self, text: str) -> List[str]:
        """
        Check a document without keeping the result.

        Args:
            text: Full document text

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        try:
            self.parse(text)
        except ParseError as e:
            errors.append(str(e))

        return errors


def parse(text: str) -> Document:
    """
    Parse a document using the default separator (a space).

    Raises:
        ParseError: If the text is malformed
    """
    return ConfigParser().parse_document(text)


def parse_with_separator(text: str, separator: str) -> Document:
    """
    Parse a document using a caller-chosen separator.

    Args:
        text: Full document text
        separator: Single character dividing keys from values

    Raises:
        ConfigurationError: If the separator is not usable
        ParseError: If the text is malformed
    """
    return ConfigParser(separator=separator).parse_document(text)


def validate(text: str, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    """
    Convenience function to validate a document.

    Returns:
        List of error messages (empty if valid)
    """
    parser = ConfigParser(separator=separator)
    return parser.validate(text)
