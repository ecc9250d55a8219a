"""Character-dispatch lexer for the teamlex language.

The dispatcher looks at one character (after whitespace) and hands the
rest of the token to exactly one category scanner. Scanners move the
shared Cursor and return a Token; comments come back as SKIPPED and the
dispatcher loops.

Lexical errors never raise. Each becomes one ERROR token at the
offending position and scanning continues from the scanner's recovery
point.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; configuration is read once at construction.

"""

from __future__ import annotations

from collections.abc import Iterator

from teamlex.config import LexConfig, get_lex_config
from teamlex.lexer.charsets import OPERATOR_START_CHARS, is_digit, is_letter
from teamlex.lexer.cursor import Cursor
from teamlex.lexer.outcomes import Matched
from teamlex.lexer.scanners import (
    CommentScannerMixin,
    IdentifierScannerMixin,
    NumberScannerMixin,
    OperatorScannerMixin,
    StringScannerMixin,
    WordScannerMixin,
)
from teamlex.tokens import EOF_LEXEME, Token, TokenKind
from teamlex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    OperatorScannerMixin,
    CommentScannerMixin,
    StringScannerMixin,
    WordScannerMixin,
    IdentifierScannerMixin,
    NumberScannerMixin,
):
    """Pull-based lexer producing one token per ``next_token()`` call.

    Usage:
            >>> lexer = Lexer("if 134x == 2")
            >>> for token in lexer.tokenize():
            ...     print(token)
        KEYWORD('if')@1:1
        IDENTIFIER('134x')@1:4
        OPERATOR('==')@1:9
        INTEGER('2')@1:12
        EOF('<EOF>')@1:13

    After EOF the lexer stays at EOF: further calls return another EOF
    token at the same position.

    """

    __slots__ = (
        "_cursor",
        "_config",
        "_source_file",
        "_start_offset",
        "_start_line",
        "_start_col",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Complete source text
            source_file: Optional source file path for token locations
            config: Lexer configuration; defaults to the active context config
        """
        self._cursor = Cursor(source)
        self._config = config if config is not None else get_lex_config()
        self._source_file = source_file

        # Start of the token being scanned
        self._start_offset: int = 0
        self._start_line: int = 1
        self._start_col: int = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF token.
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def next_token(self) -> Token:
        """Scan and return the next token."""
        cursor = self._cursor
        config = self._config

        while True:
            cursor.skip_whitespace()
            self._save_location()

            if cursor.at_end():
                return self._make_token(TokenKind.EOF, EOF_LEXEME)

            char = cursor.peek()

            if char == "/":
                outcome = self._scan_slash_or_comment()
                if isinstance(outcome, Matched):
                    return outcome.token
                # NoToken.SKIPPED: a whole comment was consumed
                continue

            if char == "$":
                return self._scan_string()

            # Identifiers and numbers share the leading "1"
            if char == "1":
                outcome = self._try_scan_identifier()
                if isinstance(outcome, Matched):
                    return outcome.token
                return self._scan_number()

            if is_letter(char):
                return self._scan_word()

            if is_digit(char) or char == ".":
                return self._scan_number()

            if char in OPERATOR_START_CHARS:
                return self._scan_operator()

            cursor.advance()
            if config.ignore_punctuation and char in config.punctuation:
                continue
            return self._make_error(char)

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Record the current position as the start of the next token."""
        cursor = self._cursor
        self._start_offset = cursor.offset
        self._start_line = cursor.line
        self._start_col = cursor.column

    def _make_token(self, kind: TokenKind, lexeme: str) -> Token:
        """Create a token spanning from the saved start to the cursor."""
        cursor = self._cursor
        return Token(
            kind=kind,
            lexeme=lexeme,
            line=self._start_line,
            column=self._start_col,
            _start_offset=self._start_offset,
            _end_offset=cursor.offset,
            _end_line=cursor.line,
            _end_column=cursor.column,
            _source_file=self._source_file,
        )

    def _make_error(self, message: str) -> Token:
        """Create an ERROR token carrying ``message`` as its lexeme."""
        token = self._make_token(TokenKind.ERROR, message)
        logger.debug("Lexical error at %d:%d: %s", token.line, token.column, message)
        return token
