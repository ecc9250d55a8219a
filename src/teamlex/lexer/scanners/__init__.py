"""Category scanners for the teamlex lexer.

Each scanner is a mixin that owns one lexical category end to end,
including its own error recovery. Scanners share nothing but the Cursor.
"""

from __future__ import annotations

from teamlex.lexer.scanners.comment import CommentScannerMixin
from teamlex.lexer.scanners.identifier import IdentifierScannerMixin
from teamlex.lexer.scanners.number import NumberScannerMixin
from teamlex.lexer.scanners.operator import OperatorScannerMixin
from teamlex.lexer.scanners.strings import StringScannerMixin
from teamlex.lexer.scanners.word import WordScannerMixin

__all__ = [
    "CommentScannerMixin",
    "IdentifierScannerMixin",
    "NumberScannerMixin",
    "OperatorScannerMixin",
    "StringScannerMixin",
    "WordScannerMixin",
]
