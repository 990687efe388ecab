"""
Splitting content lines into key and value.
"""

from typing import NamedTuple, Optional

from .errors import MalformedKeyError
from .escape import is_escaped, strip_unescaped, unescape


class SplitLine(NamedTuple):
    """Key and value of a content line, escapes resolved."""
    key: str
    value: str

    @property
    def opens_block(self) -> bool:
        """A line with no value declares a nesting parent."""
        return not self.value


def find_separator(body: str, separator: str) -> Optional[int]:
    """
    Find the first unescaped occurrence of ``separator`` in ``body``.

    Returns:
        Index of the separator, or None if every occurrence is escaped
    """
    pos = body.find(separator)
    while pos != -1:
        if not is_escaped(body, pos):
            return pos
        pos = body.find(separator, pos + 1)
    return None


def split_body(body: str, separator: str) -> SplitLine:
    """
    Split a content body at its first unescaped separator.

    Without a separator the whole body is the key and the value is empty,
    which marks the line as the parent of a nested block.

    Args:
        body: Content line body from the classifier
        separator: The active separator character

    Returns:
        SplitLine with trimmed, unescaped key and value

    Raises:
        MalformedKeyError: If the key is empty
        UnterminatedEscapeError: If either half ends with an unpaired backslash
    """
    pos = find_separator(body, separator)
    if pos is None:
        raw_key, raw_value = body, ""
    else:
        raw_key, raw_value = body[:pos], body[pos + 1:]

    raw_key = strip_unescaped(raw_key, separator)
    if not raw_key:
        raise MalformedKeyError("key is empty")

    key = unescape(raw_key, separator)
    value = unescape(strip_unescaped(raw_value, separator), separator)
    return SplitLine(key=key, value=value)
