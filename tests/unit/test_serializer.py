"""
Unit tests for document serialization.
"""

import pytest
import yaml

from superconf import Document, parse, parse_with_separator
from superconf.tools.serializer import dumps, to_yaml


NESTED_EXAMPLE = """\
other_key
    in_level see_it_is
    second_level
        another level
"""


class TestDumps:
    """Test cases for dumps."""

    def test_canonical_text(self):
        """Test the canonical form of the documented example."""
        assert dumps(parse(NESTED_EXAMPLE)) == NESTED_EXAMPLE

    def test_indent(self):
        """Test the indentation per level is configurable."""
        document = Document.from_dict({"a": {"b": {"c": "d"}}})
        assert dumps(document, indent=2) == "a\n  b\n    c d\n"

    def test_custom_separator(self):
        """Test writing with another separator."""
        document = Document.from_dict({"display name": "Jane Doe", "url": "a=b"})
        assert dumps(document, separator="=") == "display name=Jane Doe\nurl=a\\=b\n"

    def test_escapes(self):
        """Test separators and backslashes are escaped."""
        document = Document.from_dict({"hello there": "C:\\Users\\me"})
        assert dumps(document) == "hello\\ there C:\\\\Users\\\\me\n"

    def test_empty_document(self):
        """Test an empty document serializes to empty text."""
        assert dumps(Document()) == ""

    @pytest.mark.parametrize("separator,data", [
        (" ", {
            "hello there": "true",
            "path": "/home/user/Cool Path/x.txt",
            "win": "C:\\Users\\me",
            "trail": "x ",
            " lead": "y",
            "block": {},
            "outer": {"inner": {"deep": "v w", "hash": "#not a comment"}},
        }),
        ("=", {
            "display name": "Jane Doe",
            "query": "a=b&c=d",
            "key=": "ends with separator",
            "backslash\\": "=leading",
            "nested": {"empty": {}, "x": "y"},
        }),
        (":", {"second": "string", "time": "12:30", "last": {}}),
    ])
    def test_reparse_is_identical(self, separator, data):
        """Test parsing the canonical text gives back the same document."""
        document = Document.from_dict(data)
        text = dumps(document, separator=separator)

        reparsed = parse_with_separator(text, separator)

        assert reparsed == document
        assert dumps(reparsed, separator=separator) == text

    @pytest.mark.parametrize("separator,text", [
        (" ", (
            "your_path /home/user/Cool\\ Path/x.txt\n"
            "hello\\ there true\n"
            "win C:\\Users\\me\n"
            "trail x\\ \n"
            "\\ lead y\n"
        )),
        (" ", (
            "outer\n"
            "\tinner\n"
            "\t\tdeep a\\\\ b\n"
            "\tempty\n"
            "last\\\\ x\n"
        )),
        ("=", "k = v\nquery=a=b\\=c\nkey\\==x\nsp = spaced value  \n"),
        (":", "time:12:30\nblock:\n  inner: x\\:y\n  tab: a\\\tb\n"),
        ("\t", "a\tb c\nkey with space\tvalue\\\t\n"),
    ])
    def test_parsed_text_reserializes(self, separator, text):
        """Test parsed documents write back to text that parses identically."""
        document = parse_with_separator(text, separator)
        written = dumps(document, separator=separator)

        reparsed = parse_with_separator(written, separator)

        assert reparsed == document
        assert dumps(reparsed, separator=separator) == written

    def test_parsed_escaped_values(self):
        """Test escaped separators at the edges of parsed values write back."""
        document = parse("trail x\\ \nhello\\ there true\n")

        assert document.to_dict() == {"trail": "x ", "hello there": "true"}
        assert dumps(document) == "trail x\\ \nhello\\ there true\n"

    def test_empty_value_rejected(self):
        """Test an empty scalar cannot be written."""
        with pytest.raises(ValueError, match="is empty"):
            dumps(Document.from_dict({"a": ""}))

    def test_comment_key_rejected(self):
        """Test a key that would read as a comment cannot be written."""
        with pytest.raises(ValueError, match="comment"):
            dumps(Document.from_dict({"#a": "b"}))

    def test_line_terminator_rejected(self):
        """Test values spanning lines cannot be written."""
        with pytest.raises(ValueError, match="line terminator"):
            dumps(Document.from_dict({"a": "b\nc"}))

    def test_unescapable_whitespace_rejected(self):
        """Test surrounding whitespace other than the separator cannot be written."""
        with pytest.raises(ValueError, match="surrounding whitespace"):
            dumps(Document.from_dict({"a": "b "}), separator="=")
        with pytest.raises(ValueError, match="surrounding whitespace"):
            dumps(Document.from_dict({"a": "\tb"}))

    def test_invalid_indent(self):
        """Test indentation must be positive."""
        with pytest.raises(ValueError, match="Indent"):
            dumps(Document.from_dict({"a": "b"}), indent=0)

    def test_invalid_separator(self):
        """Test separator validation."""
        with pytest.raises(ValueError):
            dumps(Document.from_dict({"a": "b"}), separator="\\")


class TestToYaml:
    """Test cases for to_yaml."""

    def test_round_trip_through_yaml(self):
        """Test the YAML export loads back to the same structure."""
        document = parse(NESTED_EXAMPLE + "count 10\nflag true\n")

        loaded = yaml.safe_load(to_yaml(document))

        assert loaded == document.to_dict()
        assert loaded["count"] == "10"
        assert loaded["flag"] == "true"

    def test_block_style_in_order(self):
        """Test the export uses block style and keeps document order."""
        document = Document.from_dict({"b": "1", "a": {"c": "2"}})
        assert to_yaml(document) == "b: '1'\na:\n  c: '2'\n"
