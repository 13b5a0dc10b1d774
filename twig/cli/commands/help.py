"""
Help command implementation.
"""

import click

from twig.cli.context import CommandContext, GlobalOptions
from twig.exceptions import TwigError
from twig.help import render_command_help, render_keyword_help


def cmd_help(
    root: click.Command,
    bin_name: str,
    command: list[str] | None = None,
    keyword: str | None = None,
    options: GlobalOptions | None = None,
) -> None:
    """
    Print the help of a command, an alias or a keyword.

    Args:
        root: Root of the command tree
        bin_name: Program name used in usage lines
        command: Command path to show help for (may be a single alias)
        keyword: Keyword to show documentation for
        options: Global options from the root callback
    """
    ctx = CommandContext(options)

    try:
        with ctx.ui() as ui:
            if keyword is not None:
                render_keyword_help(ui, keyword)
            else:
                render_command_help(
                    ui,
                    root=root,
                    tokens=command or [],
                    aliases=ctx.settings.aliases,
                    bin_name=bin_name,
                )
    except TwigError as e:
        ctx.handle_error(e)
