"""ContextVar-based lexer configuration for teamlex.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction, unless one is
passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from teamlex.config import LexConfig, lex_config_context
    from teamlex.lexer import Lexer

    with lex_config_context(LexConfig(ignore_punctuation=True)):
        tokens = list(Lexer("if (x)").tokenize())

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field

from teamlex.errors import ConfigError

# Punctuation the language does not use; reported as ERROR unless ignored
DEFAULT_PUNCTUATION: frozenset[str] = frozenset("(){}[],;:")


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        ignore_punctuation: Skip characters in ``punctuation`` silently
            instead of emitting an ERROR token for each.
        punctuation: Single characters affected by ``ignore_punctuation``.

    """

    ignore_punctuation: bool = False
    punctuation: frozenset[str] = field(default=DEFAULT_PUNCTUATION)

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexConfig:
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored. ``punctuation`` may be given as a string or
        any iterable of single characters.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New LexConfig instance with values from dict.

        Raises:
            ConfigError: If ``punctuation`` holds anything but single characters.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "ignore_punctuation": True,
            ...     "punctuation": "();",
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.punctuation)
            ['(', ')', ';']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "punctuation" in filtered:
            filtered["punctuation"] = _normalize_punctuation(filtered["punctuation"])
        if "ignore_punctuation" in filtered:
            filtered["ignore_punctuation"] = bool(filtered["ignore_punctuation"])
        return cls(**filtered)


def _normalize_punctuation(value: Iterable[object]) -> frozenset[str]:
    chars = frozenset(value)
    for char in chars:
        if not isinstance(char, str) or len(char) != 1:
            raise ConfigError("punctuation", f"expected single characters, got {char!r}")
    return chars


_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (context-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context."""
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(ignore_punctuation=True)):
        ...     tokens = list(Lexer("(x)").tokenize())

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "DEFAULT_PUNCTUATION",
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
