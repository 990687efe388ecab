"""
Writing documents back out.

``dumps`` produces canonical superconf text that parses back to an equal
document with the same separator. ``to_yaml`` exports a document as YAML
for tools that do not read superconf.
"""

import logging
from typing import List

import yaml

from ..models.document import Nested, Scalar
from ..models.settings import DEFAULT_SEPARATOR, ParserSettings
from ..parser.escape import escape
from ..parser.lines import COMMENT_CHAR


logger = logging.getLogger(__name__)


def _check_text(text: str, separator: str, what: str) -> None:
    """Reject text that would not survive a round trip."""
    if "\n" in text or "\r" in text:
        raise ValueError(f"{what} {text!r} contains a line terminator")
    for ch in (text[0], text[-1]):
        if ch.isspace() and ch != separator:
            raise ValueError(f"{what} {text!r} has surrounding whitespace that cannot be escaped")


def _dump_entries(nested: Nested, separator: str, level: int, indent: int, lines: List[str]) -> None:
    prefix = " " * (level * indent)
    for key, entry in nested.items():
        _check_text(key, separator, "Key")
        if key.startswith(COMMENT_CHAR):
            raise ValueError(f"Key {key!r} would be read as a comment")

        escaped_key = escape(key, separator)
        if isinstance(entry, Scalar):
            if not entry.text:
                raise ValueError(f"Value for key {key!r} is empty and would be read as a block")
            _check_text(entry.text, separator, "Value")
            lines.append(f"{prefix}{escaped_key}{separator}{escape(entry.text, separator)}")
        else:
            lines.append(f"{prefix}{escaped_key}")
            _dump_entries(entry, separator, level + 1, indent, lines)


def dumps(document: Nested, separator: str = DEFAULT_SEPARATOR, indent: int = 4) -> str:
    """
    Serialize a document to superconf text.

    Args:
        document: Document (or any Nested entry) to write
        separator: Separator character to write between keys and values
        indent: Spaces of indentation per nesting level

    Returns:
        Document text, one line per entry, ending with a newline

    Raises:
        ValueError: If the separator or indent is invalid, or an entry
            cannot be expressed in the format
    """
    separator = ParserSettings(separator=separator).separator
    if indent < 1:
        raise ValueError(f"Indent must be at least 1, got {indent}")

    lines: List[str] = []
    _dump_entries(document, separator, 0, indent, lines)
    logger.debug(f"Serialized document to {len(lines)} lines")

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def to_yaml(document: Nested) -> str:
    """
    Export a document as YAML.

    Scalars become YAML strings and nested entries become mappings, in
    document order.
    """
    return yaml.safe_dump(
        document.to_dict(),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
