"""String literal scanner mixin."""

from __future__ import annotations

from teamlex.lexer.cursor import Cursor
from teamlex.tokens import Token, TokenKind

STRING_DELIMITER = "$"


class StringScannerMixin:
    """Mixin providing ``$``-delimited string scanning.

    Strings cannot span lines. The two-character sequence backslash + ``n``
    is forbidden inside a string; any other backslash is literal text.

    Recovery for every string error is the same: skip to the next ``$``
    (consumed) or newline (not consumed), whichever comes first.

    """

    # These will be set by the Lexer class
    _cursor: Cursor

    def _make_token(self, kind: TokenKind, lexeme: str) -> Token:
        """Create token at the saved start location. Implemented by Lexer."""
        raise NotImplementedError

    def _make_error(self, message: str) -> Token:
        """Create ERROR token at the saved start location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_string(self) -> Token:
        """Scan a string starting at its opening ``$``.

        Returns:
            STRING token with the content between delimiters, or an ERROR
            token positioned at the opening delimiter.
        """
        cursor = self._cursor
        cursor.advance()
        chars: list[str] = []

        while not cursor.at_end():
            char = cursor.advance()
            if char == STRING_DELIMITER:
                return self._make_token(TokenKind.STRING, "".join(chars))
            if char == "\\" and cursor.peek() == "n":
                cursor.advance()
                self._skip_to_string_delimiter()
                return self._make_error("string contains forbidden \\n")
            if char == "\n":
                self._skip_to_string_delimiter()
                return self._make_error("unterminated string")
            chars.append(char)

        return self._make_error("unterminated string")

    def _skip_to_string_delimiter(self) -> None:
        cursor = self._cursor
        while not cursor.at_end() and cursor.peek() not in (STRING_DELIMITER, "\n"):
            cursor.advance()
        if cursor.peek() == STRING_DELIMITER:
            cursor.advance()
