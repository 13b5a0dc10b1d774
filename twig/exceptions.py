"""
Base exceptions for twig.
"""


class TwigError(Exception):
    """Base exception for all user-facing twig errors."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigError(TwigError):
    """Raised when configuration cannot be loaded or holds an invalid value."""

    pass
