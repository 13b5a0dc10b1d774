"""
CLI utility functions.

Pure, stateless utility functions used across CLI commands.
"""

import json
import logging
import re
from typing import Any

BARE_KEY = re.compile(r"^[A-Za-z0-9_-]+$")


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: If True, set logging level to DEBUG, otherwise WARNING
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s - %(name)s - %(message)s")


def format_toml_key(key: str) -> str:
    return key if BARE_KEY.match(key) else json.dumps(key)


def format_toml_value(value: Any) -> str:
    """
    Format a scalar or array as an inline TOML value.

    Tables are formatted as inline tables.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, list):
        return "[" + ", ".join(format_toml_value(item) for item in value) + "]"
    if isinstance(value, dict):
        items = ", ".join(f"{format_toml_key(k)} = {format_toml_value(v)}" for k, v in value.items())
        return "{ " + items + " }" if items else "{}"
    # dates and times from tomllib
    return value.isoformat()


def flatten_config(config: dict[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    """
    Flatten nested tables into (dotted name, value) pairs.

    Empty tables produce no entries.
    """
    items: list[tuple[str, Any]] = []
    for key, value in config.items():
        name = f"{prefix}.{format_toml_key(key)}" if prefix else format_toml_key(key)
        if isinstance(value, dict):
            items.extend(flatten_config(value, name))
        else:
            items.append((name, value))
    return items
