"""Tests for Cursor position tracking and snapshots."""

from teamlex.lexer import Cursor, CursorState
from teamlex.lexer.charsets import is_whitespace
from teamlex.lexer.cursor import NUL


class TestCursorNavigation:
    def test_initial_position(self) -> None:
        cursor = Cursor("abc")
        assert (cursor.offset, cursor.line, cursor.column) == (0, 1, 1)
        assert not cursor.at_end()

    def test_advance_tracks_columns(self) -> None:
        cursor = Cursor("ab")
        assert cursor.advance() == "a"
        assert (cursor.offset, cursor.line, cursor.column) == (1, 1, 2)

    def test_newline_resets_column(self) -> None:
        cursor = Cursor("a\nb")
        cursor.advance()
        assert cursor.advance() == "\n"
        assert (cursor.line, cursor.column) == (2, 1)
        assert cursor.peek() == "b"

    def test_tab_is_one_column(self) -> None:
        cursor = Cursor("\tx")
        cursor.advance()
        assert cursor.column == 2

    def test_peek_and_peek_at_do_not_move(self) -> None:
        cursor = Cursor("xyz")
        assert cursor.peek() == "x"
        assert cursor.peek_at(2) == "z"
        assert cursor.peek_at(3) == NUL
        assert cursor.offset == 0

    def test_end_of_input_is_fixed_point(self) -> None:
        cursor = Cursor("a")
        cursor.advance()
        assert cursor.at_end()
        assert cursor.peek() == NUL
        assert cursor.advance() == NUL
        assert (cursor.offset, cursor.line, cursor.column) == (1, 1, 2)

    def test_empty_source(self) -> None:
        cursor = Cursor("")
        assert cursor.at_end()
        assert cursor.advance() == NUL
        assert cursor.offset == 0

    def test_skip_whitespace(self) -> None:
        cursor = Cursor(" \t\r\n  x ")
        cursor.skip_whitespace()
        assert cursor.peek() == "x"
        assert (cursor.line, cursor.column) == (2, 3)

    def test_skip_whitespace_at_end(self) -> None:
        cursor = Cursor("   ")
        cursor.skip_whitespace()
        assert cursor.at_end()
        assert cursor.column == 4

    def test_skip_whitespace_stops_at_nul(self) -> None:
        cursor = Cursor(" \0 ")
        cursor.skip_whitespace()
        assert cursor.peek() == NUL
        assert cursor.offset == 1

    def test_text_from(self) -> None:
        cursor = Cursor("hello world")
        for _ in range(5):
            cursor.advance()
        assert cursor.text_from(0) == "hello"
        assert cursor.source == "hello world"


class TestCursorSnapshots:
    def test_snapshot_is_value(self) -> None:
        cursor = Cursor("ab\ncd")
        state = cursor.snapshot()
        assert state == CursorState(offset=0, line=1, column=1)
        cursor.advance()
        assert state.offset == 0

    def test_restore_across_newline(self) -> None:
        cursor = Cursor("ab\ncd")
        cursor.advance()
        saved = cursor.snapshot()
        for _ in range(3):
            cursor.advance()
        assert (cursor.line, cursor.column) == (2, 2)

        cursor.restore(saved)
        assert (cursor.offset, cursor.line, cursor.column) == (1, 1, 2)
        assert cursor.peek() == "b"


class TestWhitespaceClass:
    def test_members(self) -> None:
        assert all(is_whitespace(c) for c in " \t\r\n")

    def test_non_members(self) -> None:
        for char in ("\f", "\v", "\u00a0", NUL, "x", "/"):
            assert not is_whitespace(char)
