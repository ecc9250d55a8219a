"""Slash and comment scanner mixin."""

from __future__ import annotations

from teamlex.lexer.cursor import Cursor
from teamlex.lexer.outcomes import Matched, NoToken, ScanOutcome
from teamlex.tokens import Token, TokenKind


class CommentScannerMixin:
    """Mixin providing ``/`` handling: division, line and block comments.

    Comments never produce tokens. A fully consumed comment is reported
    as ``NoToken.SKIPPED`` and the dispatcher scans again, so any number
    of consecutive comments costs no stack depth.

    Block comments nest: ``/* a /* b */ c */`` is one comment.

    """

    # These will be set by the Lexer class
    _cursor: Cursor

    def _make_token(self, kind: TokenKind, lexeme: str) -> Token:
        """Create token at the saved start location. Implemented by Lexer."""
        raise NotImplementedError

    def _make_error(self, message: str) -> Token:
        """Create ERROR token at the saved start location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_slash_or_comment(self) -> ScanOutcome:
        """Scan starting at ``/``.

        Returns:
            SKIPPED for a complete comment, otherwise Matched with either
            OPERATOR("/") or ERROR("unterminated comment") positioned at
            the comment opener.
        """
        cursor = self._cursor
        cursor.advance()
        follow = cursor.peek()

        if follow == "/":
            cursor.advance()
            self._skip_line_comment()
            return NoToken.SKIPPED

        if follow == "*":
            cursor.advance()
            if self._skip_block_comment():
                return NoToken.SKIPPED
            return Matched(self._make_error("unterminated comment"))

        return Matched(self._make_token(TokenKind.OPERATOR, "/"))

    def _skip_line_comment(self) -> None:
        """Consume through end of line, including the newline if present."""
        cursor = self._cursor
        while not cursor.at_end() and cursor.peek() != "\n":
            cursor.advance()
        if cursor.peek() == "\n":
            cursor.advance()

    def _skip_block_comment(self) -> bool:
        """Consume a block comment body after its opening ``/*``.

        A run of ``*`` before ``/`` closes once, so ``**/`` is a closer.

        Returns:
            True if the outermost comment was closed, False at end of input.
        """
        cursor = self._cursor
        depth = 1
        while not cursor.at_end():
            char = cursor.advance()
            if char == "/" and cursor.peek() == "*":
                cursor.advance()
                depth += 1
            elif char == "*":
                while cursor.peek() == "*":
                    cursor.advance()
                if cursor.peek() == "/":
                    cursor.advance()
                    depth -= 1
                    if depth == 0:
                        return True
        return False
