"""Character-dispatch lexer for the teamlex language.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, Cursor
├── core.py              # Lexer class (mixin composition + dispatch)
├── cursor.py            # Cursor, CursorState (position tracking)
├── charsets.py          # Character classes and predicates
├── outcomes.py          # Matched / NoToken scan outcomes
└── scanners/            # One mixin per lexical category
    ├── operator.py      # + - * = == ! != < <= <> > >=
    ├── comment.py       # / // /* nested */
    ├── strings.py       # $text$
    ├── word.py          # keywords
    ├── identifier.py    # 134x, 104_y, 199z
    └── number.py        # 42, 3.14, .5, 1e10

Usage:
    >>> from teamlex.lexer import Lexer
    >>> for token in Lexer("$hi$ <> 134x").tokenize():
    ...     print(token)
STRING('hi')@1:1
OPERATOR('<>')@1:6
IDENTIFIER('134x')@1:9
EOF('<EOF>')@1:13

"""

from teamlex.lexer.core import Lexer
from teamlex.lexer.cursor import Cursor, CursorState

__all__ = ["Cursor", "CursorState", "Lexer"]
