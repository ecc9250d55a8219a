"""Numeric literal scanner mixin."""

from __future__ import annotations

from teamlex.lexer.charsets import EXPONENT_MARKERS, SIGN_CHARS, is_digit, is_letter
from teamlex.lexer.cursor import Cursor
from teamlex.tokens import Token, TokenKind


class NumberScannerMixin:
    """Mixin providing integer and float scanning.

    Accepted forms: ``42``, ``3.14``, ``.5``, ``2e10``, ``1.5E-3``, ``.5e+7``.
    A dot must be followed by fraction digits; ``5.`` and ``5.e3`` are
    malformed floats. Malformed input becomes an ERROR token whose
    message embeds the consumed span, and scanning resumes right after it.

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

    def _scan_number(self) -> Token:
        """Scan a number starting at a digit or ``.``.

        Returns:
            INTEGER, NUMBER, or ERROR token.
        """
        cursor = self._cursor
        start = self._start_offset
        seen_int_digits = False
        seen_dot = False
        seen_fraction_digits = False
        seen_exponent = False

        if cursor.peek() == ".":
            seen_dot = True
            cursor.advance()
            if is_digit(cursor.peek()):
                seen_fraction_digits = self._consume_digits()
            elif cursor.peek() in EXPONENT_MARKERS:
                self._consume_exponent()
                return self._make_error(f"bad exponent: {cursor.text_from(start)}")
            else:
                # Bare dot: only the dot itself has been consumed
                return self._make_error(".")
        else:
            seen_int_digits = self._consume_digits()
            if cursor.peek() == ".":
                seen_dot = True
                cursor.advance()
                if cursor.peek() == ".":
                    cursor.advance()
                    self._consume_digits()
                    return self._make_error(f"malformed number: {cursor.text_from(start)}")
                seen_fraction_digits = self._consume_digits()

        if cursor.peek() in EXPONENT_MARKERS:
            if seen_dot and not seen_fraction_digits:
                self._consume_exponent()
                return self._make_error(f"malformed float: {cursor.text_from(start)}")

            seen_exponent = True
            cursor.advance()
            if cursor.peek() in SIGN_CHARS:
                cursor.advance()
            if not is_digit(cursor.peek()):
                # Take one trailing letter so "5ex" reports the whole typo
                if is_letter(cursor.peek()):
                    cursor.advance()
                return self._make_error(f"bad exponent: {cursor.text_from(start)}")
            self._consume_digits()

        lexeme = cursor.text_from(start)
        if seen_dot and not seen_fraction_digits:
            return self._make_error(f"malformed float: {lexeme}")
        if seen_dot or seen_exponent:
            return self._make_token(TokenKind.NUMBER, lexeme)
        if seen_int_digits:
            return self._make_token(TokenKind.INTEGER, lexeme)

        # Unreachable from the dispatcher; still consume so scanning progresses
        if not lexeme:
            lexeme = cursor.advance()
        return self._make_error(lexeme[:1])

    def _consume_digits(self) -> bool:
        """Consume a maximal digit run. Returns True if any digit was consumed."""
        cursor = self._cursor
        consumed = False
        while is_digit(cursor.peek()):
            cursor.advance()
            consumed = True
        return consumed

    def _consume_exponent(self) -> None:
        """Consume an exponent marker, an optional sign, and any digits."""
        cursor = self._cursor
        cursor.advance()
        if cursor.peek() in SIGN_CHARS:
            cursor.advance()
        self._consume_digits()
