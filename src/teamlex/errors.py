"""Exception classes for teamlex.

Lexical problems are never raised; they come back as ERROR tokens.
These exceptions cover the surrounding shell: reading sources and
building configuration.
"""

from __future__ import annotations


class TeamlexError(Exception):
    """Base exception for all teamlex errors.

    Subclass this for specific error categories.
    """

    pass


class SourceReadError(TeamlexError):
    """Source text could not be acquired.

    Raised when a source file is missing, unreadable, or not valid UTF-8.
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize read error.

        Args:
            path: Path that was being read
            message: Description of the failure
        """
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class ConfigError(TeamlexError):
    """Invalid lexer configuration value."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Config '{field}': {message}")
