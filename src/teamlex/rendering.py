"""Human-readable token listings.

Each token renders as ``KIND('lexeme')@line:col``, the same text
``str(token)`` produces, so listings can be compared line by line.
"""

from __future__ import annotations

from collections.abc import Iterable

from teamlex.tokens import Token

TOKENS_HEADER = "=== TOKENS ==="


def format_token(token: Token) -> str:
    return str(token)


def format_tokens(tokens: Iterable[Token], *, header: bool = True) -> str:
    """Render tokens one per line.

    Args:
        tokens: Tokens in stream order
        header: Prefix the listing with ``=== TOKENS ===``

    Returns:
        Listing text with a trailing newline.
    """
    lines = [TOKENS_HEADER] if header else []
    lines.extend(format_token(token) for token in tokens)
    return "\n".join(lines) + "\n"
