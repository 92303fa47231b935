"""Command-line driver that lexes a source file with a rules file."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .lexer import LexError, Lexer

_NORMAL = "\x1b[0m"
_YELLOW = "\x1b[33m"
_BRIGHT_BLUE = "\x1b[94m"
_BRIGHT_YELLOW = "\x1b[93m"
_BRIGHT_GREEN = "\x1b[92m"
_BRIGHT_RED = "\x1b[91m"

_PROMPT = f"{_BRIGHT_YELLOW}#{_NORMAL} "


class _Exit(Exception):
    """The user asked to leave at a prompt."""


def _ask(question: str) -> str:
    print(question)
    try:
        return input(_PROMPT).strip()
    except EOFError:
        raise _Exit from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tokenise a source file with a set of lexer rules.")
    parser.add_argument("source", nargs="?", help="source code file to lex")
    parser.add_argument("rules", nargs="?", help="file of lexer rules")
    parser.add_argument("--tokens", action="store_true", help="print the lexed token sequence")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the lexer; returns the exit status."""
    args = _build_parser().parse_args(argv)
    print(
        f"{_BRIGHT_BLUE}Welcome to the test version of a "
        f"{_BRIGHT_YELLOW}C--{_BRIGHT_BLUE} lexer.{_NORMAL}"
    )

    source, rules = args.source, args.rules
    try:
        if source is None:
            source = _ask("Please enter the filename of a C or Javascript, or C-- source code file.")
        if rules is None:
            rules = _ask("Please enter the filename of a lex file for the tokenization process.")
    except _Exit:
        print("Exiting...")
        return 0

    if not source or not rules:
        print("A source file and a rules file are both required.", file=sys.stderr)
        return 1

    try:
        lexer = Lexer.from_files(source, rules)
        success = lexer.lex()
    except (OSError, LexError) as exc:
        print(f"{_BRIGHT_RED}Error:{_NORMAL} {exc}", file=sys.stderr)
        return 1

    if success:
        print(f"Lexer {_BRIGHT_GREEN}SUCCESSFUL!{_NORMAL}")
    else:
        print(f"Lexer is reporting failure to lex file '{source}'.")

    if args.tokens:
        for token_type, literal in lexer.tokens:
            print(
                f"{_YELLOW}Token Type{_NORMAL}: '{token_type}'\n"
                f"{_BRIGHT_BLUE}Token Literal{_NORMAL}: '{literal}'{_NORMAL}"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())