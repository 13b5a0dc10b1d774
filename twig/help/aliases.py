"""
Alias resolution for help requests.

An alias maps a name to a list of command-line tokens. When the first token of
a definition is itself an alias, it is expanded in place and the remaining
tokens are appended unchanged, so ``a = ["b", "x"]`` with ``b = ["log"]``
resolves to ``["log", "x"]``.
"""

import logging
import shlex
from collections.abc import Mapping
from typing import NamedTuple

from .exceptions import CyclicAliasError

logger = logging.getLogger(__name__)

AliasTable = Mapping[str, list[str]]


class ResolvedAlias(NamedTuple):
    """An alias definition as configured and fully expanded."""

    original: list[str]
    expanded: list[str]


def resolve_alias(table: AliasTable, alias_name: str) -> ResolvedAlias | None:
    """
    Resolve an alias to its definition, recursively expanding nested aliases.

    Args:
        table: Mapping of alias name to its configured token list
        alias_name: Name to resolve

    Returns:
        ResolvedAlias with the original and expanded definitions, or None if
        alias_name is not an alias

    Raises:
        CyclicAliasError: If the expansion revisits an alias
    """
    if alias_name not in table:
        return None

    original = list(table[alias_name])
    seen: set[str] = set()
    expanded = expand_alias_recursively(table, alias_name, seen)
    logger.debug(f"Resolved alias '{alias_name}': {original} -> {expanded}")
    return ResolvedAlias(original, expanded)


def expand_alias_recursively(table: AliasTable, alias_name: str, seen: set[str]) -> list[str]:
    """
    Expand alias_name until its leading token is not an alias.

    Every alias visited is recorded in seen, which is shared across the whole
    expansion so indirect cycles are caught as well as self references.
    """
    if alias_name in seen:
        raise CyclicAliasError(alias_name)
    seen.add(alias_name)

    definition = list(table[alias_name])
    if definition and definition[0] in table:
        logger.debug(f"Alias '{alias_name}' starts with alias '{definition[0]}'")
        return expand_alias_recursively(table, definition[0], seen) + definition[1:]
    return definition


def format_alias_definition(definition: list[str]) -> str:
    """Format an alias definition for the banner shown above its help."""
    if any("\0" in token for token in definition):
        # shlex cannot quote NUL bytes
        return f"Alias for {definition!r}"
    return f'Alias for "{shlex.join(definition)}"'
