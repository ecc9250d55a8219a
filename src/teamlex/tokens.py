"""Token and TokenKind definitions for the teamlex lexer.

The lexer produces a stream of Token objects that a parser consumes.
Each Token has a kind, the exact lexeme, and the 1-based line/column of
its first character.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from teamlex.location import SourceLocation


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    Closed set: every token has exactly one kind.
    """

    IDENTIFIER = auto()  # 134abc, 104_x, 199Name
    KEYWORD = auto()  # if else while return func
    INTEGER = auto()  # 42
    NUMBER = auto()  # 3.14, .5, 2e10
    STRING = auto()  # $text$
    OPERATOR = auto()  # + - * / = == != < <= <> > >=
    ERROR = auto()  # malformed input, lexeme holds the message
    EOF = auto()  # end of input, lexeme is "<EOF>"


EOF_LEXEME = "<EOF>"


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The token kind
        lexeme: Source text of the token, or the message for ERROR tokens
        line: Line of the first character (1-indexed)
        column: Column of the first character (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _end_line: Line after the last consumed character
        _end_column: Column after the last consumed character
        _source_file: Optional source file path

    Rendering:
        ``str(token)`` gives the canonical ``KIND('lexeme')@line:col`` form.

    """

    kind: TokenKind
    lexeme: str
    line: int
    column: int
    _start_offset: int = 0
    _end_offset: int = 0
    _end_line: int | None = None
    _end_column: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from teamlex.location import SourceLocation

        loc = SourceLocation(
            lineno=self.line,
            col_offset=self.column,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_line,
            end_col_offset=self._end_column,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def span(self) -> tuple[int, int]:
        """Absolute (start, end) offsets of the consumed source text."""
        return self._start_offset, self._end_offset

    def __str__(self) -> str:
        return f"{self.kind.name}('{self.lexeme}')@{self.line}:{self.column}"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.lexeme
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.line}:{self.column})"
