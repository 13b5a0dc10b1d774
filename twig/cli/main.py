"""
twig CLI Main Module

Command-line interface for the twig version control tool.
"""

from typing import Literal

import typer

from twig.cli.commands import cmd_config_get, cmd_config_list, cmd_config_path, cmd_help
from twig.cli.context import GlobalOptions
from twig.config import COLOR_CHOICES
from twig.help import KEYWORDS, keyword_hint_after_help, keyword_names

# Type aliases for better type safety and IDE support
OutputFormat = Literal["text", "json", "yaml"]
ColorWhen = Literal["always", "never", "auto"]


class AlphabeticalOrderGroup(typer.core.TyperGroup):
    """Custom Typer Group that lists commands in alphabetical order."""

    def list_commands(self, ctx: typer.Context) -> list[str]:
        return sorted(self.commands.keys())


def validate_format(value: str) -> OutputFormat:
    """Validate format option (text, json or yaml)."""
    if value not in ["text", "json", "yaml"]:
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Invalid format '{value}'. Must be 'text', 'json' or 'yaml'."
        )
    return value  # type: ignore[return-value]


def validate_color(value: str | None) -> ColorWhen | None:
    """Validate color option (always, never or auto)."""
    if value is not None and value not in COLOR_CHOICES:
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Invalid color choice '{value}'. Must be one of: {', '.join(COLOR_CHOICES)}."
        )
    return value  # type: ignore[return-value]


def validate_keyword(value: str | None) -> str | None:
    """Validate keyword option against the registered keywords."""
    if value is not None and value not in keyword_names():
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Invalid keyword '{value}'. Must be one of: {', '.join(keyword_names())}."
        )
    return value


def _help_epilog() -> str:
    width = max(len(keyword.name) for keyword in KEYWORDS)
    lines = ["\b", "Keywords:"]
    lines.extend(f"  {keyword.name.ljust(width)}  {keyword.description}" for keyword in KEYWORDS)
    return "\n".join(lines) + "\n\n" + keyword_hint_after_help()


# Create Typer app with alphabetical command ordering
app = typer.Typer(
    name="twig",
    help="twig - a version control system",
    add_completion=False,
    rich_markup_mode=None,
    cls=AlphabeticalOrderGroup,
    invoke_without_command=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_file: str | None = typer.Option(
        None, "--config-file", help="Additional configuration file to load (TOML)"
    ),
    config: list[str] | None = typer.Option(
        None, "--config", help="Additional configuration option NAME=VALUE. Can be used multiple times."
    ),
    color: str | None = typer.Option(
        None, "--color", help="When to colorize output (always, never, auto)", callback=validate_color
    ),
    no_pager: bool = typer.Option(False, "--no-pager", help="Disable the pager"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose output"),
) -> None:
    """twig - a version control system"""
    ctx.obj = GlobalOptions(
        config_file=config_file,
        config_overrides=config or [],
        color=color,
        no_pager=no_pager,
        verbose=verbose,
    )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command(epilog=_help_epilog())
def help(
    ctx: typer.Context,
    command: list[str] | None = typer.Argument(None, help="Print help for the subcommand(s)"),
    keyword: str | None = typer.Option(
        None,
        "-k",
        "--keyword",
        help="Show help for keywords instead of commands",
        callback=validate_keyword,
    ),
) -> None:
    """Print this message or the help of the given subcommand(s)."""
    if keyword is not None and command:
        raise typer.BadParameter("cannot be used with '[COMMAND]...'", param_hint="'--keyword'")

    root_ctx = ctx.find_root()
    cmd_help(
        root=root_ctx.command,
        bin_name=root_ctx.info_name or "twig",
        command=command,
        keyword=keyword,
        options=ctx.obj,
    )


# Config command group with alphabetical ordering
config_app = typer.Typer(
    name="config",
    help="Manage config options",
    add_completion=False,
    rich_markup_mode=None,
    invoke_without_command=True,
    cls=AlphabeticalOrderGroup,
)


@config_app.callback()
def config_callback(ctx: typer.Context) -> None:
    """Manage config options."""
    # If no subcommand was provided, show help
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@config_app.command("list")
def config_list(
    ctx: typer.Context,
    name: str | None = typer.Argument(None, help="Only list values under this dotted name"),
    format: str = typer.Option(
        "text", "-f", "--format", help="Output format: text, json or yaml", callback=validate_format
    ),
) -> None:
    """List variables set in config files, along with their values."""
    cmd_config_list(name=name, format=format, options=ctx.obj)


@config_app.command("get")
def config_get(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Dotted name of the value, e.g. ui.color"),
) -> None:
    """Get the value of a given config option."""
    cmd_config_get(name=name, options=ctx.obj)


@config_app.command("path")
def config_path(ctx: typer.Context) -> None:
    """Print the path to the user config file."""
    cmd_config_path(options=ctx.obj)


# Register config app as a subcommand
app.add_typer(config_app)


def main() -> None:
    """Main CLI entry point."""
    app(prog_name="twig")


if __name__ == "__main__":
    main()
