"""
Config command implementations.
"""

import json
from typing import Literal

import yaml

from twig.cli.context import CommandContext, GlobalOptions
from twig.cli.utils import flatten_config, format_toml_key, format_toml_value
from twig.config import user_config_path
from twig.exceptions import ConfigError, TwigError

# Type alias for output format
OutputFormat = Literal["text", "json", "yaml"]


def cmd_config_list(
    name: str | None = None,
    format: OutputFormat = "text",
    options: GlobalOptions | None = None,
) -> None:
    """
    List the effective configuration.

    Args:
        name: Optional dotted name of a table or value to restrict the listing to
        format: Output format ("text", "json" or "yaml")
        options: Global options from the root callback
    """
    ctx = CommandContext(options)

    try:
        value = ctx.settings.get(name) if name else ctx.settings.to_dict()
        with ctx.ui() as ui:
            if format == "json":
                ui.writeln(json.dumps(value, indent=2, default=str))
            elif format == "yaml":
                ui.write(yaml.safe_dump(value, sort_keys=False, default_flow_style=False))
            elif isinstance(value, dict):
                prefix = ".".join(format_toml_key(part) for part in name.split(".")) if name else ""
                for key, item in flatten_config(value, prefix):
                    ui.writeln(f"{key} = {format_toml_value(item)}")
            else:
                ui.writeln(f"{name} = {format_toml_value(value)}")
    except TwigError as e:
        ctx.handle_error(e)


def cmd_config_get(name: str, options: GlobalOptions | None = None) -> None:
    """
    Print a single config value.

    Strings are printed without quotes; other values as TOML.
    """
    ctx = CommandContext(options)

    try:
        value = ctx.settings.get(name)
        if isinstance(value, dict):
            raise ConfigError(
                f"{name} is a table, not a value",
                hint=f"Use 'config list {name}' to show its contents",
            )
        with ctx.ui() as ui:
            ui.writeln(value if isinstance(value, str) else format_toml_value(value))
    except TwigError as e:
        ctx.handle_error(e)


def cmd_config_path(options: GlobalOptions | None = None) -> None:
    """Print the path of the user config file."""
    ctx = CommandContext(options)
    with ctx.ui() as ui:
        ui.writeln(str(user_config_path()))
