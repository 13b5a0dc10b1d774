"""
Command context for shared setup across CLI commands.
"""

from dataclasses import dataclass, field
from typing import TextIO

import typer

from twig.config import UserSettings, load_user_settings
from twig.exceptions import ConfigError
from twig.ui import Ui, use_color

from .utils import setup_logging


@dataclass
class GlobalOptions:
    """Options accepted by every command, collected by the root callback."""

    config_file: str | None = None
    config_overrides: list[str] = field(default_factory=list)
    color: str | None = None
    no_pager: bool = False
    verbose: bool = False


class CommandContext:
    """
    Shared context for CLI commands.

    Handles common setup: setting up logging, loading the layered
    configuration and deciding how output is colored and paged.
    """

    def __init__(self, options: GlobalOptions | None = None):
        """
        Initialize command context from the global options.

        Args:
            options: Global options from the root callback (defaults if None)
        """
        options = options or GlobalOptions()

        # Set up logging
        self.verbose = options.verbose
        setup_logging(self.verbose)

        # Load configuration
        try:
            self.settings: UserSettings = load_user_settings(
                config_file=options.config_file,
                overrides=options.config_overrides,
            )
            self.color_choice = options.color or self.settings.color_choice
            self.pagination = "never" if options.no_pager else self.settings.pagination
        except ConfigError as e:
            self.handle_error(e)

    def ui(self, stream: TextIO | None = None) -> Ui:
        """Create the output stream for one command invocation."""
        return Ui(
            color=use_color(self.color_choice, stream),
            paginate=self.pagination,
            stream=stream,
        )

    def handle_error(self, error: Exception, show_traceback: bool | None = None) -> None:
        """
        Handle errors consistently across commands.

        Args:
            error: The exception that occurred
            show_traceback: Whether to show traceback (defaults to verbose mode)
        """
        if show_traceback is None:
            show_traceback = self.verbose

        error_prefix = typer.style("Error: ", fg=typer.colors.RED, bold=True)
        typer.echo(f"{error_prefix}{error}", err=True)
        hint = getattr(error, "hint", None)
        if hint:
            hint_prefix = typer.style("Hint: ", fg=typer.colors.CYAN, bold=True)
            typer.echo(f"{hint_prefix}{hint}", err=True)
        if show_traceback:
            import traceback
            traceback.print_exc()
        raise typer.Exit(1)
