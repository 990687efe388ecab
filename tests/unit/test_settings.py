"""
Unit tests for parser settings.
"""

import pytest
from pydantic import ValidationError

from superconf.models.settings import DEFAULT_SEPARATOR, ParserSettings


class TestParserSettings:
    """Test cases for ParserSettings."""

    def test_default_settings(self):
        """Test default parser settings."""
        settings = ParserSettings()

        assert settings.separator == DEFAULT_SEPARATOR == " "
        assert settings.strict_mode is False

    def test_custom_settings(self):
        """Test custom parser settings."""
        settings = ParserSettings(separator="\t", strict_mode=True)

        assert settings.separator == "\t"
        assert settings.strict_mode is True

    def test_separator_length(self):
        """Test separators must be one character."""
        with pytest.raises(ValidationError, match="single character"):
            ParserSettings(separator="")
        with pytest.raises(ValidationError, match="single character"):
            ParserSettings(separator="::")

    def test_escape_character_rejected(self):
        """Test the backslash cannot be a separator."""
        with pytest.raises(ValidationError, match="escape character"):
            ParserSettings(separator="\\")

    def test_line_terminator_rejected(self):
        """Test line terminators cannot be separators."""
        for separator in ("\n", "\r"):
            with pytest.raises(ValidationError, match="line terminator"):
                ParserSettings(separator=separator)

    def test_frozen(self):
        """Test settings cannot be modified."""
        settings = ParserSettings()
        with pytest.raises(ValidationError):
            settings.separator = "="
