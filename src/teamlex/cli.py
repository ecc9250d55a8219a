"""Command-line interface for teamlex.

Usage:
    teamlex FILE             # Lex a file
    teamlex -f FILE          # Same, explicit flag
    teamlex -c               # Read console input until a line "END"
    teamlex                  # Same as -c

Options:
    --format {text,json}     Output format (default: text)
    --ignore-punctuation     Skip ( ) { } [ ] , ; : instead of reporting them
    -v, --verbose            Log lexical errors and I/O at DEBUG level

Lexical errors are part of the output, not failures: the exit status is
0 whenever the source could be read, 1 when it could not.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from teamlex.config import LexConfig
from teamlex.errors import SourceReadError
from teamlex.lexer import Lexer
from teamlex.rendering import format_tokens
from teamlex.serialization import to_json
from teamlex.sources import CONSOLE_TERMINATOR, read_console, read_file
from teamlex.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

CONSOLE_PROMPT = f"Enter source code (type '{CONSOLE_TERMINATOR}' on a separate line to finish):"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="teamlex",
        description="Tokenize teamlex source and print the token stream",
    )
    parser.add_argument("file", nargs="?", help="Source file to tokenize")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-f", "--file", dest="file_flag", metavar="FILE", help="Source file to tokenize")
    source.add_argument("-c", "--console", action="store_true", help="Read source from standard input")
    parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    parser.add_argument(
        "--ignore-punctuation",
        action="store_true",
        help="Silently skip unsupported punctuation instead of reporting errors",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the CLI and return the process exit status."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.file and (args.file_flag or args.console):
        parser.error("a positional FILE cannot be combined with -f or -c")

    configure_logging(stderr, verbose=args.verbose)

    path = args.file or args.file_flag
    try:
        if path:
            source = read_file(path)
        else:
            print(CONSOLE_PROMPT, file=stderr)
            source = read_console(stdin)
    except SourceReadError as e:
        logger.debug("Source acquisition failed", exc_info=True)
        print(f"Error reading file '{e.path}': {e.message}", file=stderr)
        return 1

    config = LexConfig(ignore_punctuation=args.ignore_punctuation)
    tokens = list(Lexer(source, source_file=path, config=config).tokenize())

    if args.format == "json":
        stdout.write(to_json(tokens, indent=2) + "\n")
    else:
        stdout.write(format_tokens(tokens))
    return 0
