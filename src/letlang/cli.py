"""letlang command-line entry point.

Usage:
    letlang tokenize <file>             Display the token stream of a file
    letlang tokenize -c <source>        Display the token stream of inline source
"""

from __future__ import annotations

import sys
from pathlib import Path

from letlang.lexer.lexer import Lexer, LexerError


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    if len(args) < 1:
        print(__doc__.strip())
        return 1

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from letlang import __version__
        print(f"letlang {__version__}")
        return 0

    if command != "tokenize":
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1

    if len(args) < 2:
        print(f"Error: command '{command}' requires a file argument")
        return 1

    if args[1] == "-c":
        if len(args) < 3:
            print("Error: option '-c' requires a source argument")
            return 1
        return _cmd_tokenize(args[2])

    filepath = Path(args[1])
    if not filepath.exists():
        print(f"Error: file not found: {filepath}")
        return 1

    try:
        source = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {filepath}: {e}")
        return 1

    return _cmd_tokenize(source)


def _cmd_tokenize(source: str) -> int:
    """Display the token stream."""
    try:
        tokens = Lexer(source).tokenize()
    except LexerError as e:
        print(f"Lexer error: {e}")
        return 1

    for tok in tokens:
        print(tok)
    return 0


if __name__ == "__main__":
    sys.exit(main())
