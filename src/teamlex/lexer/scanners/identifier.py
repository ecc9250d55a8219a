"""Team-prefixed identifier scanner mixin."""

from __future__ import annotations

from teamlex.lexer.charsets import (
    TEAM_PREFIXES,
    is_letter_digit_or_underscore,
    is_letter_or_underscore,
)
from teamlex.lexer.cursor import Cursor
from teamlex.lexer.outcomes import Matched, NoToken, ScanOutcome
from teamlex.tokens import Token, TokenKind

PREFIX_LEN = 3


class IdentifierScannerMixin:
    """Mixin providing identifier scanning.

    An identifier is a team prefix (``134``, ``104`` or ``199``) followed by
    a letter or underscore, then any letters, digits and underscores.
    ``134`` alone or ``1349`` is a number, not an identifier.

    """

    # These will be set by the Lexer class
    _cursor: Cursor

    def _make_token(self, kind: TokenKind, lexeme: str) -> Token:
        """Create token at the saved start location. Implemented by Lexer."""
        raise NotImplementedError

    def _try_scan_identifier(self) -> ScanOutcome:
        """Try to scan an identifier at the current ``1``.

        Returns:
            Matched(IDENTIFIER) on success. NOT_APPLICABLE otherwise, with
            the cursor exactly where it started.
        """
        cursor = self._cursor
        prefix = "".join(cursor.peek_at(k) for k in range(PREFIX_LEN))
        if prefix not in TEAM_PREFIXES:
            return NoToken.NOT_APPLICABLE

        saved = cursor.snapshot()
        for _ in range(PREFIX_LEN):
            cursor.advance()

        # The character after the prefix decides; back out if it can't start a body
        if not is_letter_or_underscore(cursor.peek()):
            cursor.restore(saved)
            return NoToken.NOT_APPLICABLE

        while is_letter_digit_or_underscore(cursor.peek()):
            cursor.advance()

        return Matched(self._make_token(TokenKind.IDENTIFIER, cursor.text_from(saved.offset)))
