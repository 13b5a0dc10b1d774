"""
Rendering of help requests.

A help request either names a keyword (a documentation topic) or a command
path. A command path whose first token is an alias is replaced by the alias
expansion and the help is preceded by the alias definition.
"""

import logging
import re
from collections.abc import Sequence

import click

from twig.ui import Ui

from .aliases import AliasTable, format_alias_definition, resolve_alias
from .exceptions import ExtraneousAliasArgumentsError, KeywordNotFoundError
from .keywords import find_keyword
from .matcher import match_command_path, validate_command_path, walk_command_path

logger = logging.getLogger(__name__)

SECTION_HEADING = re.compile(r"^(Usage|Arguments|Options|Commands):", re.MULTILINE)


def render_keyword_help(ui: Ui, name: str) -> None:
    """
    Write the documentation for a keyword.

    Raises:
        KeywordNotFoundError: If no keyword has this name
    """
    keyword = find_keyword(name)
    if keyword is None:
        raise KeywordNotFoundError(name)

    ui.request_pager()
    ui.write(keyword.content)


def render_command_help(
    ui: Ui,
    root: click.Command,
    tokens: Sequence[str],
    aliases: AliasTable,
    bin_name: str = "twig",
) -> None:
    """
    Write the long help of the command named by tokens.

    Args:
        ui: Output stream
        root: Root of the command tree
        tokens: Requested command path, possibly a single alias name
        aliases: Configured alias table
        bin_name: Program name used in usage lines

    Raises:
        CyclicAliasError: If the alias expansion is recursive
        ExtraneousAliasArgumentsError: If tokens follow an alias name
        InvalidSubcommandError: If the path names an unknown subcommand
    """
    command_path = list(tokens)
    alias_definition = None

    if command_path:
        resolved = resolve_alias(aliases, command_path[0])
        if resolved is not None:
            if len(command_path) > 1:
                raise ExtraneousAliasArgumentsError(command_path[0])
            alias_definition = resolved.original
            command_path = resolved.expanded

    validate_command_path(root, command_path)
    command, depth = match_command_path(root, command_path)
    logger.debug(f"Rendering help for {command_path[:depth] or [bin_name]}")

    help_text = render_long_help(root, command_path[:depth], bin_name)

    ui.request_pager()
    if alias_definition is not None:
        ui.writeln(format_alias_definition(alias_definition))
        ui.writeln()

    if ui.color:
        ui.write(style_help(help_text))
    else:
        ui.write(help_text)


def render_long_help(root: click.Command, command_path: Sequence[str], bin_name: str) -> str:
    """Render the help of the command at command_path with a proper context chain."""
    ctx = root.context_class(root, info_name=bin_name)
    command = root
    for name, command in walk_command_path(root, command_path):
        ctx = command.context_class(command, info_name=name, parent=ctx)
    text = command.get_help(ctx)
    return text if text.endswith("\n") else f"{text}\n"


def style_help(help_text: str) -> str:
    """Highlight section headings of click help output."""
    return SECTION_HEADING.sub(lambda m: click.style(m.group(0), bold=True, underline=True), help_text)
