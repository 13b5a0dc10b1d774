"""
Custom exceptions for the help engine.
"""

from twig.exceptions import TwigError


class HelpError(TwigError):
    """Base exception for help resolution errors."""

    pass


class CyclicAliasError(HelpError):
    """Raised when an alias expansion revisits a name already in its expansion chain."""

    def __init__(self, alias_name: str) -> None:
        super().__init__(f'Recursive alias definition involving "{alias_name}"')
        self.alias_name = alias_name


class ExtraneousAliasArgumentsError(HelpError):
    """Raised when a help request names an alias and supplies further tokens after it."""

    def __init__(self, alias_name: str) -> None:
        super().__init__(f"Invalid arguments following alias '{alias_name}'")
        self.alias_name = alias_name


class InvalidSubcommandError(HelpError):
    """Raised when a token names no subcommand where one was expected."""

    def __init__(self, token: str, command_path: list[str], suggestion: str | None = None) -> None:
        hint = f"a similar subcommand exists: '{suggestion}'" if suggestion else None
        super().__init__(f"unrecognized subcommand '{token}'", hint=hint)
        self.token = token
        self.command_path = command_path
        self.suggestion = suggestion


class KeywordNotFoundError(HelpError):
    """Raised when a keyword has no matching registry entry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No help found for keyword '{name}'")
        self.name = name
