"""Source acquisition: files and console input.

The lexer takes one complete string. These helpers produce it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from teamlex.errors import SourceReadError
from teamlex.utils.logger import get_logger

logger = get_logger(__name__)

CONSOLE_TERMINATOR = "END"


def read_file(path: str | Path) -> str:
    """Read a UTF-8 source file.

    Raises:
        SourceReadError: If the file cannot be opened or decoded.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(str(path), str(e)) from e
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def read_console(stream: TextIO, terminator: str = CONSOLE_TERMINATOR) -> str:
    """Read lines until end of stream or a line equal to ``terminator``.

    The terminator line itself is dropped. Every kept line ends with ``\\n``.

    Example:
        >>> import io
        >>> read_console(io.StringIO("if\\n$x$\\nEND\\nignored\\n"))
        'if\\n$x$\\n'
    """
    lines: list[str] = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if line == terminator:
            break
        lines.append(line + "\n")
    return "".join(lines)
