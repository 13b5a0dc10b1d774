"""
Unit tests for CLI utility functions.
"""

from datetime import date

from twig.cli.utils import flatten_config, format_toml_key, format_toml_value


class TestFormatToml:
    """Test cases for TOML formatting helpers."""

    def test_scalars(self):
        """Test formatting of scalar values."""
        assert format_toml_value("never") == '"never"'
        assert format_toml_value('say "hi"') == '"say \\"hi\\""'
        assert format_toml_value(True) == "true"
        assert format_toml_value(3) == "3"
        assert format_toml_value(1.5) == "1.5"
        assert format_toml_value(date(2024, 1, 2)) == "2024-01-02"

    def test_arrays_and_tables(self):
        """Test formatting of arrays and inline tables."""
        assert format_toml_value(["log", "-r", "@"]) == '["log", "-r", "@"]'
        assert format_toml_value({"a": 1, "b c": [True]}) == '{ a = 1, "b c" = [true] }'
        assert format_toml_value({}) == "{}"

    def test_keys(self):
        """Test that only non-bare keys are quoted."""
        assert format_toml_key("color") == "color"
        assert format_toml_key("my-alias_2") == "my-alias_2"
        assert format_toml_key("my.alias") == '"my.alias"'


class TestFlattenConfig:
    """Test cases for flatten_config."""

    def test_nested_tables(self):
        """Test that nested tables become dotted names."""
        config = {"ui": {"color": "auto", "diff": {"format": "git"}}, "top": 1}

        assert flatten_config(config) == [
            ("ui.color", "auto"),
            ("ui.diff.format", "git"),
            ("top", 1),
        ]

    def test_empty_tables_are_skipped(self):
        """Test that empty tables produce no entries."""
        assert flatten_config({"aliases": {}, "ui": {"color": "auto"}}) == [("ui.color", "auto")]

    def test_prefix(self):
        """Test flattening below a prefix."""
        assert flatten_config({"color": "auto"}, "ui") == [("ui.color", "auto")]
