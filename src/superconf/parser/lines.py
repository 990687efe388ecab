"""
Line classification.

Each physical line is either blank, a comment, or content. Content lines
carry their indentation width and a body with the indentation and any
unescaped trailing whitespace removed; escape sequences are left for the
splitter to resolve.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .escape import rstrip_unescaped


COMMENT_CHAR = "#"


class LineKind(Enum):
    """Classification of a physical line."""
    BLANK = "blank"
    COMMENT = "comment"
    CONTENT = "content"


@dataclass(frozen=True)
class ClassifiedLine:
    """
    A classified physical line.

    Attributes:
        kind: Blank, comment or content
        number: 1-based line number in the document (0 if unknown)
        raw: The line without its terminator
        indent_width: Number of leading whitespace characters
        indentation: The leading whitespace itself
        body: Content with indentation and trailing whitespace removed
    """
    kind: LineKind
    number: int
    raw: str
    indent_width: int = 0
    indentation: str = ""
    body: str = ""

    @property
    def is_content(self) -> bool:
        return self.kind is LineKind.CONTENT


def classify_line(line: str, number: int = 0) -> ClassifiedLine:
    """
    Classify a single physical line.

    Tabs and spaces each count as one unit of indentation.

    Args:
        line: The line, optionally still carrying its terminator
        number: 1-based line number used in error messages

    Returns:
        The classified line; classification never fails
    """
    raw = line.rstrip("\r\n")
    content = raw.lstrip()

    if not content:
        return ClassifiedLine(kind=LineKind.BLANK, number=number, raw=raw)

    if content.startswith(COMMENT_CHAR):
        return ClassifiedLine(kind=LineKind.COMMENT, number=number, raw=raw)

    indent_width = len(raw) - len(content)
    return ClassifiedLine(
        kind=LineKind.CONTENT,
        number=number,
        raw=raw,
        indent_width=indent_width,
        indentation=raw[:indent_width],
        body=rstrip_unescaped(content),
    )


def iter_lines(text: str) -> Iterator[ClassifiedLine]:
    """
    Classify every line of ``text``, numbering from 1.

    A terminator at the very end of the text does not start another line.
    """
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    for number, line in enumerate(lines, start=1):
        yield classify_line(line, number)


def content_lines(text: str) -> Iterator[ClassifiedLine]:
    """Yield only the content lines of ``text``."""
    for line in iter_lines(text):
        if line.is_content:
            yield line
