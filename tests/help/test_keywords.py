"""
Unit tests for the keyword registry.
"""

import dataclasses
import re

import click
import pytest
import typer

from twig.cli.main import app
from twig.help.keywords import KEYWORDS, find_keyword, keyword_hint_after_help, keyword_names


class TestKeywords:
    """Test cases for keyword lookup."""

    def test_names_are_unique(self):
        """Test that no two keywords share a name."""
        names = keyword_names()
        assert len(names) == len(set(names))

    def test_expected_keywords(self):
        """Test the registered keyword names."""
        assert keyword_names() == [
            "bookmarks",
            "config",
            "filesets",
            "glossary",
            "revsets",
            "templates",
            "tutorial",
        ]

    def test_every_keyword_has_content(self):
        """Test that every keyword ships a description and documentation."""
        for keyword in KEYWORDS:
            assert keyword.description
            assert keyword.content.startswith("# ")

    def test_find_keyword(self):
        """Test exact lookup."""
        keyword = find_keyword("revsets")

        assert keyword is not None
        assert keyword.name == "revsets"
        assert "Revsets" in keyword.content

    @pytest.mark.parametrize("name", ["revset", "REVSETS", "", "log"])
    def test_find_keyword_miss(self, name):
        """Test that lookups are exact and misses return None."""
        assert find_keyword(name) is None

    def test_keywords_are_immutable(self):
        """Test that keyword entries cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            KEYWORDS[0].content = "changed"

    @pytest.mark.parametrize("keyword", KEYWORDS, ids=lambda keyword: keyword.name)
    def test_documented_commands_exist(self, keyword):
        """Test that command lines in the documentation only name real commands."""
        commands = typer.main.get_command(app).commands
        inline = re.findall(r"`twig (\S+)", keyword.content)
        shell_blocks = re.findall(r"^```shell\n(.*?)^```", keyword.content, re.MULTILINE | re.DOTALL)
        shell_lines = [
            name for block in shell_blocks for name in re.findall(r"^twig (\S+)", block, re.MULTILINE)
        ]

        for name in inline + shell_lines:
            assert name.rstrip("`") in commands, f"{keyword.name} mentions unknown command '{name}'"


class TestKeywordHint:
    """Test cases for the hint shown below `help --help`."""

    def test_plain_hint(self):
        """Test the unstyled hint."""
        assert keyword_hint_after_help() == (
            "'twig help --help' lists available keywords. "
            "Use 'twig help -k' to show help for one of these keywords."
        )

    def test_styled_hint(self):
        """Test that the commands are bold when styled."""
        hint = keyword_hint_after_help("tw", color=True)

        assert click.style("'tw help -k'", bold=True) in hint
        assert click.unstyle(hint).startswith("'tw help --help' lists")
