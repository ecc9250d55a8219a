"""Character sets and predicates for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Classification is ASCII only; ``str.isalpha`` would admit Unicode letters.

Usage:
    from teamlex.lexer.charsets import is_letter

    if is_letter(char):
        ...
"""

import string

LETTERS: frozenset[str] = frozenset(string.ascii_letters)
DIGITS: frozenset[str] = frozenset(string.digits)
LETTERS_OR_UNDERSCORE: frozenset[str] = LETTERS | frozenset("_")
IDENTIFIER_CHARS: frozenset[str] = LETTERS_OR_UNDERSCORE | DIGITS
WHITESPACE: frozenset[str] = frozenset(" \t\r\n")

# Characters that open an operator token (before any compound lookahead)
OPERATOR_START_CHARS: frozenset[str] = frozenset("+-=*<>!")

EXPONENT_MARKERS: frozenset[str] = frozenset("eE")
SIGN_CHARS: frozenset[str] = frozenset("+-")

KEYWORDS: frozenset[str] = frozenset({"if", "else", "while", "return", "func"})

# Every identifier opens with one of these
TEAM_PREFIXES: tuple[str, ...] = ("134", "104", "199")


def is_letter(char: str) -> bool:
    return char in LETTERS


def is_digit(char: str) -> bool:
    return char in DIGITS


def is_letter_or_underscore(char: str) -> bool:
    return char in LETTERS_OR_UNDERSCORE


def is_letter_digit_or_underscore(char: str) -> bool:
    return char in IDENTIFIER_CHARS


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE
