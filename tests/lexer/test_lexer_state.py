"""Tests for the pull interface and the EOF fixed point."""

from teamlex.lexer import Lexer
from teamlex.lexer.outcomes import NoToken
from teamlex.tokens import TokenKind


class TestPullInterface:
    def test_next_token_sequence(self) -> None:
        lexer = Lexer("if 5")
        assert lexer.next_token().kind == TokenKind.KEYWORD
        assert lexer.next_token().kind == TokenKind.INTEGER
        assert lexer.next_token().kind == TokenKind.EOF

    def test_eof_repeats_without_moving(self) -> None:
        lexer = Lexer("x  ")
        lexer.next_token()
        first = lexer.next_token()
        offset = lexer._cursor.offset
        for _ in range(3):
            again = lexer.next_token()
            assert str(again) == str(first) == "EOF('<EOF>')@1:4"
        assert lexer._cursor.offset == offset

    def test_tokenize_stops_after_eof(self) -> None:
        tokens = list(Lexer("1 2").tokenize())
        assert [t.kind for t in tokens] == [TokenKind.INTEGER, TokenKind.INTEGER, TokenKind.EOF]

    def test_tokenize_continues_from_pulled_position(self) -> None:
        lexer = Lexer("1 2 3")
        lexer.next_token()
        assert [t.lexeme for t in lexer.tokenize()] == ["2", "3", "<EOF>"]


class TestBacktrackingState:
    def test_identifier_rollback_leaves_cursor_at_start(self) -> None:
        lexer = Lexer("1349")
        lexer._save_location()
        outcome = lexer._try_scan_identifier()
        assert outcome is NoToken.NOT_APPLICABLE
        assert (lexer._cursor.offset, lexer._cursor.column) == (0, 1)

    def test_config_captured_at_construction(self) -> None:
        from teamlex.config import LexConfig, lex_config_context

        with lex_config_context(LexConfig(ignore_punctuation=True)):
            lexer = Lexer("(1)")
        assert [t.kind for t in lexer.tokenize()] == [TokenKind.INTEGER, TokenKind.EOF]
