"""Token serialization: JSON round-trip for teamlex tokens.

Converts tokens to/from JSON-compatible dicts. Useful for golden files
and for handing token streams to tools written in other languages.

All output is deterministic (sorted keys).

Example:
    from teamlex import tokenize
    from teamlex.serialization import from_json, to_json

    tokens = tokenize("if 134x")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from teamlex.tokens import Token, TokenKind


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The kind is stored by name. Offsets describe the consumed source span.

    """
    start, end = token.span
    data: dict[str, Any] = {
        "kind": token.kind.name,
        "lexeme": token.lexeme,
        "line": token.line,
        "column": token.column,
        "offset": start,
        "end_offset": end,
    }
    if token._end_line is not None:
        data["end_line"] = token._end_line
        data["end_column"] = token._end_column
    if token._source_file is not None:
        data["source_file"] = token._source_file
    return data


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Raises:
        ValueError: If the kind is missing or unknown.

    """
    kind_name = data.get("kind")
    try:
        kind = TokenKind[kind_name]  # type: ignore[misc]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown token kind: {kind_name!r}") from None

    return Token(
        kind=kind,
        lexeme=data["lexeme"],
        line=data["line"],
        column=data["column"],
        _start_offset=data.get("offset", 0),
        _end_offset=data.get("end_offset", 0),
        _end_line=data.get("end_line"),
        _end_column=data.get("end_column"),
        _source_file=data.get("source_file"),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array.

    Args:
        tokens: Tokens to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps([to_dict(t) for t in tokens], indent=indent, sort_keys=True)


def from_json(data: str) -> list[Token]:
    """Deserialize a token sequence from a JSON string.

    Raises:
        ValueError: If the JSON is not an array of token objects.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        raise ValueError(f"Expected a JSON array of tokens, got {type(raw).__name__}")
    return [from_dict(item) for item in raw]
