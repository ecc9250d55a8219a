"""Scan position over an immutable source buffer.

The Cursor is the single source of truth for where the lexer is. Every
sub-scanner moves it through ``advance()``; nothing else writes
``offset``, ``line`` or ``column``.

Thread Safety:
Cursor is mutable and owned by exactly one Lexer. CursorState snapshots
are frozen and safe to share.

"""

from __future__ import annotations

from dataclasses import dataclass

from teamlex.lexer.charsets import is_whitespace

# Returned by peek/advance past the end of the buffer
NUL = "\0"


@dataclass(frozen=True, slots=True)
class CursorState:
    """Snapshot of a Cursor position, used for backtracking."""

    offset: int
    line: int
    column: int


class Cursor:
    """Mutable scan position over a source string.

    Invariant: ``offset`` indexes the next unconsumed character and
    ``line``/``column`` (both 1-indexed) describe that character.

    Usage:
            >>> cursor = Cursor("a\\nb")
            >>> cursor.advance(), cursor.advance()
            ('a', '\\n')
            >>> cursor.line, cursor.column
            (2, 1)

    """

    __slots__ = ("_source", "_source_len", "offset", "line", "column")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self.offset = 0
        self.line = 1
        self.column = 1

    @property
    def source(self) -> str:
        return self._source

    def at_end(self) -> bool:
        return self.offset >= self._source_len

    def peek(self) -> str:
        """Current character, or NUL at end of input."""
        if self.offset >= self._source_len:
            return NUL
        return self._source[self.offset]

    def peek_at(self, k: int) -> str:
        """Character ``k`` positions ahead of the current one, or NUL."""
        j = self.offset + k
        if j >= self._source_len:
            return NUL
        return self._source[j]

    def advance(self) -> str:
        """Consume and return the current character.

        Updates line/column tracking. At end of input nothing moves and
        NUL is returned.
        """
        if self.offset >= self._source_len:
            return NUL

        char = self._source[self.offset]
        self.offset += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def skip_whitespace(self) -> None:
        """Advance over spaces, tabs, carriage returns and newlines."""
        while is_whitespace(self.peek()):
            self.advance()

    def text_from(self, start: int) -> str:
        """Source text consumed since absolute offset ``start``."""
        return self._source[start : self.offset]

    def snapshot(self) -> CursorState:
        return CursorState(self.offset, self.line, self.column)

    def restore(self, state: CursorState) -> None:
        """Roll back to a previously taken snapshot."""
        self.offset = state.offset
        self.line = state.line
        self.column = state.column
