"""Tests for keywords, unknown words, team-prefixed identifiers and stray characters."""

import pytest

from teamlex import tokenize
from teamlex.config import LexConfig
from teamlex.lexer import Lexer
from teamlex.tokens import TokenKind


def _kinds_and_lexemes(source: str) -> list[tuple[TokenKind, str]]:
    return [(t.kind, t.lexeme) for t in tokenize(source)[:-1]]


class TestKeywords:
    @pytest.mark.parametrize("word", ["if", "else", "while", "return", "func"])
    def test_keyword(self, word: str) -> None:
        assert _kinds_and_lexemes(word) == [(TokenKind.KEYWORD, word)]

    @pytest.mark.parametrize("word", ["iff", "If", "x", "Return", "alamin"])
    def test_unknown_word(self, word: str) -> None:
        assert _kinds_and_lexemes(word) == [(TokenKind.ERROR, f"unknown word: {word}")]

    def test_word_stops_at_digit(self) -> None:
        assert _kinds_and_lexemes("while2") == [
            (TokenKind.KEYWORD, "while"),
            (TokenKind.INTEGER, "2"),
        ]

    def test_word_stops_at_underscore(self) -> None:
        assert _kinds_and_lexemes("if_x") == [
            (TokenKind.KEYWORD, "if"),
            (TokenKind.ERROR, "_"),
            (TokenKind.ERROR, "unknown word: x"),
        ]


class TestIdentifiers:
    @pytest.mark.parametrize(
        "source", ["134Alamin", "104_var", "199x9_z", "134_", "104A1B2", "199__"]
    )
    def test_identifier(self, source: str) -> None:
        assert _kinds_and_lexemes(source) == [(TokenKind.IDENTIFIER, source)]

    @pytest.mark.parametrize("source", ["134", "104", "199", "1", "1340", "10"])
    def test_prefix_without_body_is_integer(self, source: str) -> None:
        assert _kinds_and_lexemes(source) == [(TokenKind.INTEGER, source)]

    def test_prefix_then_digit_then_letter(self) -> None:
        """The character right after the prefix decides; digits mean a number."""
        assert _kinds_and_lexemes("1999x") == [
            (TokenKind.INTEGER, "1999"),
            (TokenKind.ERROR, "unknown word: x"),
        ]

    def test_non_team_prefix(self) -> None:
        assert _kinds_and_lexemes("135abc") == [
            (TokenKind.INTEGER, "135"),
            (TokenKind.ERROR, "unknown word: abc"),
        ]

    def test_prefix_then_dot_is_float(self) -> None:
        assert _kinds_and_lexemes("134.5") == [(TokenKind.NUMBER, "134.5")]

    def test_prefix_then_exponent_letter_is_identifier(self) -> None:
        """e is a letter, so 134e5 is a team identifier, not a float."""
        assert _kinds_and_lexemes("134e5") == [(TokenKind.IDENTIFIER, "134e5")]

    def test_identifier_in_expression(self) -> None:
        assert _kinds_and_lexemes("104abc+1") == [
            (TokenKind.IDENTIFIER, "104abc"),
            (TokenKind.OPERATOR, "+"),
            (TokenKind.INTEGER, "1"),
        ]

    def test_rollback_restores_position(self) -> None:
        tokens = tokenize("134\n  x")
        assert (tokens[0].kind, tokens[0].span) == (TokenKind.INTEGER, (0, 3))
        assert (tokens[1].line, tokens[1].column) == (2, 3)


class TestUnknownCharacters:
    @pytest.mark.parametrize("char", ["@", "#", "(", ")", "{", ",", ";", "_", "&", "\0"])
    def test_single_error(self, char: str) -> None:
        assert _kinds_and_lexemes(char) == [(TokenKind.ERROR, char)]

    def test_each_character_is_one_error(self) -> None:
        tokens = tokenize("@@ 5")
        assert [(t.kind, t.lexeme, t.column) for t in tokens[:-1]] == [
            (TokenKind.ERROR, "@", 1),
            (TokenKind.ERROR, "@", 2),
            (TokenKind.INTEGER, "5", 4),
        ]

    def test_punctuation_can_be_ignored(self) -> None:
        config = LexConfig(ignore_punctuation=True)
        tokens = list(Lexer("func 134f(104a, 104b) { return 1; }", config=config).tokenize())
        assert [(t.kind, t.lexeme) for t in tokens[:-1]] == [
            (TokenKind.KEYWORD, "func"),
            (TokenKind.IDENTIFIER, "134f"),
            (TokenKind.IDENTIFIER, "104a"),
            (TokenKind.IDENTIFIER, "104b"),
            (TokenKind.KEYWORD, "return"),
            (TokenKind.INTEGER, "1"),
        ]

    def test_ignoring_punctuation_keeps_other_errors(self) -> None:
        config = LexConfig(ignore_punctuation=True)
        tokens = list(Lexer("(@)", config=config).tokenize())
        assert [(t.kind, t.lexeme, t.column) for t in tokens[:-1]] == [(TokenKind.ERROR, "@", 2)]
