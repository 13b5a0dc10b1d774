"""
Command path matching against the click command tree.

Help targets may be followed by arguments meant for the target command itself
(``twig help log -- -r``), so the walk stops at the first token that is not a
subcommand instead of rejecting the whole path.
"""

import difflib
import logging
from collections.abc import Iterator, Sequence

import click

from .exceptions import InvalidSubcommandError

logger = logging.getLogger(__name__)


def _children(command: click.Command) -> dict[str, click.Command]:
    # groups built by typer's bundled click are not click.Group subclasses
    return getattr(command, "commands", None) or {}


def is_group(command: click.Command) -> bool:
    return isinstance(getattr(command, "commands", None), dict)


def walk_command_path(root: click.Command, tokens: Sequence[str]) -> Iterator[tuple[str, click.Command]]:
    """Yield (name, command) for each leading token that names a subcommand."""
    current = root
    for name in tokens:
        child = _children(current).get(name)
        if child is None:
            logger.debug(f"Stopped matching at '{name}' under '{current.name}'")
            return
        current = child
        yield name, current


def match_command_path(root: click.Command, tokens: Sequence[str]) -> tuple[click.Command, int]:
    """
    Find the deepest command reachable by consuming tokens as subcommand names.

    Args:
        root: Root of the command tree
        tokens: Command path, possibly followed by other arguments

    Returns:
        Tuple of (matched command, number of tokens consumed). An empty or
        non-matching path yields (root, 0).
    """
    command, depth = root, 0
    for _, command in walk_command_path(root, tokens):
        depth += 1
    return command, depth


def validate_command_path(root: click.Command, tokens: Sequence[str]) -> None:
    """
    Reject a path that names an unknown subcommand where one is expected.

    Option-like tokens and anything following a leaf command are arguments for
    the target command and are accepted.

    Raises:
        InvalidSubcommandError: If the first unmatched token sits under a group
            and does not look like an option
    """
    command, depth = match_command_path(root, tokens)
    if depth == len(tokens):
        return

    token = tokens[depth]
    if token.startswith("-") or not is_group(command):
        return

    matches = difflib.get_close_matches(token, list(_children(command)), n=1)
    raise InvalidSubcommandError(
        token,
        command_path=list(tokens[:depth]),
        suggestion=matches[0] if matches else None,
    )
