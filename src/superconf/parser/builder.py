"""
Indentation-driven tree building.

The builder consumes content lines in order and keeps a stack of frames,
one per open block. The bottom frame is the document itself at width 0.
A line without a value opens a provisional frame whose width is fixed by
the first line indented deeper than its parent; if no such line follows,
the block is closed empty.

Each frame owns a plain dictionary. When a frame is popped, its dictionary
becomes a Nested entry in the parent frame under the frame's key.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..models.document import Document, Entry, Nested, Scalar
from .errors import DuplicateKeyError, IndentationMismatchError, UnexpectedNestingError
from .lines import ClassifiedLine
from .splitter import SplitLine


logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """
    An open block on the builder stack.

    Attributes:
        width: Indentation width of the block's lines, None until the first
            child line fixes it
        key: Key the block is attached under in its parent (None for the root)
        line_number: Line that opened the block
        entries: Entries collected so far
    """
    width: Optional[int]
    key: Optional[str] = None
    line_number: int = 0
    entries: Dict[str, Entry] = field(default_factory=dict)

    @property
    def is_provisional(self) -> bool:
        return self.width is None


class TreeBuilder:
    """
    Assemble a Document from split content lines.

    Feed lines with ``feed`` in document order, then call ``finish`` once
    to close every open block and obtain the Document. Non-fatal findings
    are collected in ``warnings``.
    """

    def __init__(self):
        self._stack: List[Frame] = [Frame(width=0)]
        self._previous_scalar = False
        self._indent_chars: Optional[str] = None
        self._mixed_reported = False
        self.warnings: List[str] = []

    @property
    def depth(self) -> int:
        """Number of open blocks below the document."""
        return len(self._stack) - 1

    def feed(self, line: ClassifiedLine, split: SplitLine) -> None:
        """
        Add one content line to the tree.

        Args:
            line: The classified content line
            split: Its key and value

        Raises:
            IndentationMismatchError: If the indentation matches no open block
            UnexpectedNestingError: If the line is indented under a scalar
            DuplicateKeyError: If the key already exists in its block
        """
        indent = line.indent_width
        self._check_indentation(line)

        top = self._stack[-1]
        if top.is_provisional:
            parent = self._stack[-2]
            if indent > parent.width:
                top.width = indent
                logger.debug(f"Block '{top.key}' from line {top.line_number} has width {indent}")
            else:
                self._pop()
        elif indent > top.width:
            if self._previous_scalar:
                raise UnexpectedNestingError(
                    "line is indented under a key that holds a value", line.number, line.raw
                )
            raise IndentationMismatchError(
                f"indentation of {indent} opens no block", line.number, line.raw
            )

        while self._stack[-1].width > indent:
            self._pop()

        top = self._stack[-1]
        if top.width != indent:
            raise IndentationMismatchError(
                f"indentation of {indent} does not match the enclosing block width of {top.width}",
                line.number,
                line.raw,
            )

        if split.key in top.entries:
            raise DuplicateKeyError(f"duplicate key '{split.key}'", line.number, line.raw)

        if split.opens_block:
            self._stack.append(Frame(width=None, key=split.key, line_number=line.number))
            self._previous_scalar = False
        else:
            top.entries[split.key] = Scalar(text=split.value)
            self._previous_scalar = True

    def finish(self) -> Document:
        """
        Close all open blocks and return the Document.

        The builder must not be fed again afterwards.
        """
        while len(self._stack) > 1:
            self._pop()
        root = self._stack[0]
        return Document(children=root.entries)

    def _pop(self) -> None:
        frame = self._stack.pop()
        if frame.is_provisional:
            self._warn(
                f"line {frame.line_number}: key '{frame.key}' has no children and is an empty block",
                level=logging.DEBUG,
            )
        self._stack[-1].entries[frame.key] = Nested(children=frame.entries)
        logger.debug(f"Closed block '{frame.key}' with {len(frame.entries)} entries")

    def _check_indentation(self, line: ClassifiedLine) -> None:
        chars = "".join(sorted(set(line.indentation)))
        if not chars:
            return
        if "\t" in chars and " " in chars:
            self._warn(f"line {line.number}: indentation mixes tabs and spaces")
            return
        if self._indent_chars is None:
            self._indent_chars = chars
        elif chars != self._indent_chars and not self._mixed_reported:
            self._mixed_reported = True
            self._warn(f"line {line.number}: indentation style differs from earlier lines")

    def _warn(self, message: str, level: int = logging.WARNING) -> None:
        logger.log(level, message)
        self.warnings.append(message)
