"""
Backslash escape handling.

A backslash before the active separator makes that separator literal text;
a backslash before another backslash makes a literal backslash. Any other
backslash pair is kept as written, so paths such as ``C:\\Users`` survive
unchanged.
"""

from typing import Optional

from .errors import UnterminatedEscapeError


ESCAPE_CHAR = "\\"


def _backslash_run(text: str, end: int) -> int:
    """Count consecutive backslashes immediately before index ``end``."""
    count = 0
    i = end - 1
    while i >= 0 and text[i] == ESCAPE_CHAR:
        count += 1
        i -= 1
    return count


def is_escaped(text: str, pos: int) -> bool:
    """
    Check whether the character at ``pos`` is escaped.

    The character is escaped when it is preceded by an odd number of
    backslashes: each pair of backslashes is a literal backslash, and the
    last unpaired one escapes the character.

    Args:
        text: Line text, escapes unresolved
        pos: Index of the character to check

    Returns:
        True if the character is literal text, False if it is live

    Raises:
        IndexError: If ``pos`` is out of bounds
    """
    if pos < 0 or pos >= len(text):
        raise IndexError(f"position {pos} out of range for text of length {len(text)}")
    return _backslash_run(text, pos) % 2 == 1


def ends_with_escape(text: str) -> bool:
    """Check whether ``text`` ends with a backslash that escapes nothing."""
    return _backslash_run(text, len(text)) % 2 == 1


def unescape(text: str, separator: str) -> str:
    """
    Resolve escape sequences in ``text``.

    Args:
        text: Raw key or value text
        separator: The active separator character

    Returns:
        Text with ``\\<separator>`` and ``\\\\`` resolved

    Raises:
        UnterminatedEscapeError: If the text ends with an unpaired backslash
    """
    out = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch != ESCAPE_CHAR:
            out.append(ch)
            i += 1
            continue
        if i + 1 >= length:
            raise UnterminatedEscapeError("trailing backslash escapes nothing")
        following = text[i + 1]
        if following == separator or following == ESCAPE_CHAR:
            out.append(following)
        else:
            out.append(ch)
            out.append(following)
        i += 2
    return "".join(out)


def rstrip_unescaped(text: str, separator: Optional[str] = None) -> str:
    """
    Strip trailing whitespace, keeping one escaped whitespace character.

    With a separator, only an escaped separator is kept; any other escaped
    whitespace is stripped, leaving the backslash unpaired.
    """
    stripped = text.rstrip()
    if len(stripped) < len(text) and ends_with_escape(stripped):
        following = text[len(stripped)]
        if separator is None or following == separator:
            return text[:len(stripped) + 1]
    return stripped


def strip_unescaped(text: str, separator: Optional[str] = None) -> str:
    """Strip surrounding whitespace that is not protected by an escape."""
    return rstrip_unescaped(text, separator).lstrip()


def escape(text: str, separator: str) -> str:
    """
    Escape ``text`` so that ``unescape`` restores it.

    Args:
        text: Literal key or value text
        separator: The active separator character

    Returns:
        Text with backslashes doubled and separators escaped
    """
    out = []
    for ch in text:
        if ch == ESCAPE_CHAR or ch == separator:
            out.append(ESCAPE_CHAR)
        out.append(ch)
    return "".join(out)
