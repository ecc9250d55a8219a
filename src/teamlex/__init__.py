"""
teamlex: lexer for the team-prefixed teaching language

Turns source text into classified tokens (kind, exact text, 1-based
line/column) for a downstream parser. Lexical errors are reported as
ERROR tokens; scanning always continues to a single EOF.

Quick Start:
    >>> from teamlex import tokenize
    >>> for token in tokenize("func 134main $hi$"):
    ...     print(token)
    KEYWORD('func')@1:1
    IDENTIFIER('134main')@1:6
    STRING('hi')@1:14
    EOF('<EOF>')@1:18

    >>> # Pull tokens one at a time
    >>> from teamlex import Lexer
    >>> lexer = Lexer("1.5e3")
    >>> lexer.next_token()
    Token(NUMBER, '1.5e3', 1:1)

Command line:
    python -m teamlex program.tl
"""

from teamlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from teamlex.errors import ConfigError, SourceReadError, TeamlexError
from teamlex.lexer import Cursor, CursorState, Lexer
from teamlex.location import SourceLocation
from teamlex.rendering import format_token, format_tokens
from teamlex.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Tokenize a complete source string.

    Args:
        source: Source text
        source_file: Optional file path recorded in token locations
        config: Lexer configuration (defaults to the active context config)

    Returns:
        All tokens, ending with exactly one EOF token.
    """
    return list(Lexer(source, source_file=source_file, config=config).tokenize())


__all__ = [
    "ConfigError",
    "Cursor",
    "CursorState",
    "LexConfig",
    "Lexer",
    "SourceLocation",
    "SourceReadError",
    "TeamlexError",
    "Token",
    "TokenKind",
    "__version__",
    "format_token",
    "format_tokens",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    "tokenize",
]
