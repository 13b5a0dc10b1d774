"""
User configuration.

Configuration is read from TOML files and merged in layers: built-in defaults,
the user config file, an optional file given on the command line, and
individual ``NAME=VALUE`` overrides.
"""

import copy
import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from twig.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TWIG_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "ui": {
        "color": "auto",
        "paginate": "auto",
    },
    "aliases": {},
}

COLOR_CHOICES = ("always", "never", "auto")
PAGINATE_CHOICES = ("auto", "never")


def user_config_path() -> Path:
    """Return the path of the user config file, whether or not it exists."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "twig" / "config.toml"


def merge_config(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge overlay into a copy of base; overlay wins."""
    merged = copy.deepcopy(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML config file.

    Raises:
        ConfigError: If the file is not valid TOML or cannot be read
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e


def parse_config_override(override: str) -> dict[str, Any]:
    """
    Parse a ``NAME=VALUE`` override into a nested table.

    The value is parsed as a TOML value and used as a plain string if that
    fails, so ``ui.color=never`` and ``ui.color="never"`` are equivalent.

    Raises:
        ConfigError: If the override has no ``=`` or an empty name
    """
    name, sep, raw_value = override.partition("=")
    name = name.strip()
    if not sep or not name:
        raise ConfigError(
            f"Invalid config override '{override}'",
            hint="Overrides must have the form NAME=VALUE, for example ui.color=never",
        )

    try:
        value = tomllib.loads(f"value = {raw_value}")["value"]
    except tomllib.TOMLDecodeError:
        value = raw_value

    table: dict[str, Any] = {}
    current = table
    parts = name.split(".")
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value
    return table


def load_user_settings(
    config_file: str | None = None,
    overrides: list[str] | None = None,
) -> "UserSettings":
    """
    Build settings from all configuration layers.

    Args:
        config_file: Extra config file given on the command line (must exist)
        overrides: List of NAME=VALUE overrides

    Returns:
        UserSettings with the merged configuration
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    user_path = user_config_path()
    if user_path.is_file():
        logger.debug(f"Loading user config from {user_path}")
        config = merge_config(config, load_config_file(user_path))
    else:
        logger.debug(f"No user config at {user_path}")

    if config_file:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {config_file}")
        logger.debug(f"Loading config from {path}")
        config = merge_config(config, load_config_file(path))

    for override in overrides or []:
        config = merge_config(config, parse_config_override(override))

    return UserSettings(config)


class UserSettings:
    """Read-only view of the merged configuration."""

    def __init__(self, config: dict[str, Any]) -> None:
        self._config = config

    def get(self, name: str) -> Any:
        """
        Look up a dotted config name such as ``ui.color``.

        Raises:
            ConfigError: If no value exists at that name
        """
        value: Any = self._config
        for part in name.split("."):
            if not isinstance(value, dict) or part not in value:
                raise ConfigError(f"Value not found for {name}")
            value = value[part]
        return value

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._config)

    @property
    def aliases(self) -> dict[str, list[str]]:
        """
        Alias table from the ``[aliases]`` section.

        Raises:
            ConfigError: If the section or a definition has the wrong shape
        """
        table = self._config.get("aliases", {})
        if not isinstance(table, dict):
            raise ConfigError("The 'aliases' config must be a table")

        aliases = {}
        for name, definition in table.items():
            if not isinstance(definition, list) or not all(isinstance(t, str) for t in definition):
                raise ConfigError(
                    f'Alias definition for "{name}" must be a string list',
                    hint=f'For example: {name} = ["log", "-r", "@"]',
                )
            aliases[name] = definition
        return aliases

    @property
    def color_choice(self) -> str:
        return self._choice("ui.color", COLOR_CHOICES)

    @property
    def pagination(self) -> str:
        return self._choice("ui.paginate", PAGINATE_CHOICES)

    def _choice(self, name: str, choices: tuple[str, ...]) -> str:
        value = self.get(name)
        if value not in choices:
            raise ConfigError(
                f"Invalid value for {name}: {value!r}",
                hint=f"Must be one of: {', '.join(choices)}",
            )
        return value
