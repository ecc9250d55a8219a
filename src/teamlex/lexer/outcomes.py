"""Outcomes a sub-scanner can report besides a token.

Scanners that may decline the input return ``ScanOutcome``:

- ``Matched(token)``: the scanner produced a token.
- ``NoToken.NOT_APPLICABLE``: the input is not this scanner's; nothing
  was consumed, the dispatcher tries the next candidate.
- ``NoToken.SKIPPED``: input was consumed but yields no token (a
  complete comment); the dispatcher scans again.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from teamlex.tokens import Token


class NoToken(Enum):
    NOT_APPLICABLE = auto()
    SKIPPED = auto()


@dataclass(frozen=True, slots=True)
class Matched:
    token: Token


ScanOutcome = Matched | NoToken
