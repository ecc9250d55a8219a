"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

_BLOCK = """\
// compute the area of every shape
func 134area = 104width * 199_height
if 134area >= 1.5e3 /* large /* really large */ */
    return $large shape$
else return 42 <> .5e-2
while 134i < 100 134i = 134i + 1
"""


@pytest.fixture
def large_source() -> str:
    """Generate a large source text (~100KB) mixing every token category."""
    return _BLOCK * (100_000 // len(_BLOCK))


@pytest.fixture
def comment_heavy_source() -> str:
    """Source that is mostly nested and line comments."""
    return "/* a /* b */ c */ // line\n" * 5_000 + "1"


@pytest.fixture
def error_heavy_source() -> str:
    """Source where most tokens are errors with recovery."""
    return "5.e+7 12..3 $bad\\n text$ @ unknown ! .\n" * 2_000
