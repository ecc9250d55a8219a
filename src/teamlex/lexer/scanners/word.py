"""Keyword scanner mixin."""

from __future__ import annotations

from teamlex.lexer.charsets import KEYWORDS, is_letter
from teamlex.lexer.cursor import Cursor
from teamlex.tokens import Token, TokenKind


class WordScannerMixin:
    """Mixin providing keyword-or-error scanning for letter runs.

    Identifiers must open with a team prefix, so a bare word is either a
    keyword or an error.

    """

    # These will be set by the Lexer class
    _cursor: Cursor
    _start_offset: int

    def _make_token(self, kind: TokenKind, lexeme: str) -> Token:
        """Create token at the saved start location. Implemented by Lexer."""
        raise NotImplementedError

    def _make_error(self, message: str) -> Token:
        """Create ERROR token at the saved start location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_word(self) -> Token:
        """Scan a maximal run of letters (no digits, no underscores)."""
        cursor = self._cursor
        while is_letter(cursor.peek()):
            cursor.advance()

        word = cursor.text_from(self._start_offset)
        if word in KEYWORDS:
            return self._make_token(TokenKind.KEYWORD, word)
        return self._make_error(f"unknown word: {word}")
