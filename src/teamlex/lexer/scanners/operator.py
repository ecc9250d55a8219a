"""Operator scanner mixin."""

from __future__ import annotations

from teamlex.lexer.cursor import Cursor
from teamlex.tokens import Token, TokenKind

# First character -> two-character operators it can open
COMPOUND_OPERATORS: dict[str, tuple[str, ...]] = {
    "=": ("==",),
    "!": ("!=",),
    "<": ("<=", "<>"),
    ">": (">=",),
}


class OperatorScannerMixin:
    """Mixin providing operator scanning.

    Resolves one- and two-character operators with a single character of
    lookahead. A bare ``!`` is not an operator.

    """

    # These will be set by the Lexer class
    _cursor: Cursor

    def _make_token(self, kind: TokenKind, lexeme: str) -> Token:
        """Create token at the saved start location. Implemented by Lexer."""
        raise NotImplementedError

    def _make_error(self, message: str) -> Token:
        """Create ERROR token at the saved start location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_operator(self) -> Token:
        """Scan an operator starting at one of ``+ - = * < > !``.

        Returns:
            OPERATOR token, or ERROR("!") for a ``!`` not followed by ``=``.
        """
        cursor = self._cursor
        char = cursor.advance()
        follow = cursor.peek()

        for compound in COMPOUND_OPERATORS.get(char, ()):
            if follow == compound[1]:
                cursor.advance()
                return self._make_token(TokenKind.OPERATOR, compound)

        if char == "!":
            return self._make_error("!")
        return self._make_token(TokenKind.OPERATOR, char)
