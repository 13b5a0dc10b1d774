"""
Help engine: alias resolution, command path matching and help rendering.
"""

from .aliases import ResolvedAlias, expand_alias_recursively, format_alias_definition, resolve_alias
from .exceptions import (
    CyclicAliasError,
    ExtraneousAliasArgumentsError,
    HelpError,
    InvalidSubcommandError,
    KeywordNotFoundError,
)
from .keywords import KEYWORDS, Keyword, find_keyword, keyword_hint_after_help, keyword_names
from .matcher import match_command_path, validate_command_path
from .renderer import render_command_help, render_keyword_help

__all__ = [
    "ResolvedAlias",
    "resolve_alias",
    "expand_alias_recursively",
    "format_alias_definition",
    "match_command_path",
    "validate_command_path",
    "render_command_help",
    "render_keyword_help",
    "Keyword",
    "KEYWORDS",
    "find_keyword",
    "keyword_names",
    "keyword_hint_after_help",
    "HelpError",
    "CyclicAliasError",
    "ExtraneousAliasArgumentsError",
    "InvalidSubcommandError",
    "KeywordNotFoundError",
]
