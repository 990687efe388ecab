"""
Document data models for superconf.

A parsed document is a tree of string keys. Every key maps to an Entry,
which is either a Scalar holding a string value or a Nested mapping of
further entries. The two variants are told apart by their ``kind`` tag.
"""

from types import MappingProxyType
from typing import Annotated, Any, Dict, List, Literal, Mapping, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Scalar(BaseModel):
    """
    A leaf entry holding a string value.

    Attributes:
        text: The value with escapes resolved
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    text: str = Field(..., description="Scalar value text")

    def to_dict(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


class Nested(BaseModel):
    """
    An entry holding a mapping of child entries.

    Children are held in a read-only mapping, and the entry behaves like
    one: children can be looked up with ``nested[key]``, tested with
    ``key in nested`` and listed with ``keys()`` / ``items()``.

    Attributes:
        children: Child entries keyed by name
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["nested"] = "nested"
    children: Mapping[str, "Entry"] = Field(
        default_factory=dict, validate_default=True, description="Child entries"
    )

    @field_validator('children')
    @classmethod
    def validate_keys(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        """Reject empty keys and freeze the mapping."""
        for key in v:
            if not key:
                raise ValueError("Keys cannot be empty")
        return MappingProxyType(dict(v))

    @field_serializer('children')
    def serialize_children(self, v: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(v)

    def __getitem__(self, key: str) -> "Entry":
        return self.children[key]

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __len__(self) -> int:
        return len(self.children)

    def keys(self) -> List[str]:
        return list(self.children.keys())

    def items(self) -> List[Tuple[str, "Entry"]]:
        return list(self.children.items())

    def get(self, key: str, default: Optional["Entry"] = None) -> Optional["Entry"]:
        return self.children.get(key, default)

    def lookup(self, *path: str) -> "Entry":
        """
        Walk a path of keys through nested entries.

        Args:
            *path: Keys to follow, outermost first

        Returns:
            The entry at the end of the path (``self`` for an empty path)

        Raises:
            KeyError: If a key is missing or a scalar is reached early
        """
        current: Entry = self
        for depth, key in enumerate(path):
            if not isinstance(current, Nested) or key not in current.children:
                walked = ".".join(path[:depth + 1])
                raise KeyError(f"No entry at '{walked}'")
            current = current.children[key]
        return current

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain dictionaries of strings."""
        return {key: entry.to_dict() for key, entry in self.children.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Nested":
        """
        Build a tree from plain dictionaries.

        String values become Scalar entries and dictionaries become Nested
        entries.

        Raises:
            ValueError: If a value is neither a string nor a dictionary
        """
        return cls(children=_entries_from_dict(data))


def _entries_from_dict(data: Dict[str, Any]) -> Dict[str, "Entry"]:
    entries: Dict[str, Entry] = {}
    for key, value in data.items():
        if not isinstance(key, str):
            raise ValueError(f"Keys must be strings, got {type(key).__name__}")
        if isinstance(value, str):
            entries[key] = Scalar(text=value)
        elif isinstance(value, dict):
            entries[key] = Nested(children=_entries_from_dict(value))
        else:
            raise ValueError(f"Value for '{key}' must be a string or mapping, got {type(value).__name__}")
    return entries


Entry = Annotated[Union[Scalar, Nested], Field(discriminator="kind")]

Nested.model_rebuild()


class Document(Nested):
    """The root mapping produced by a successful parse."""

    def __str__(self) -> str:
        return f"Document({len(self.children)} keys)"
