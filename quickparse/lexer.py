"""A regex-driven lexer that grows a buffer until its rule stops matching."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .fileutil import PathLike, read_file
from .tokens import Token, empty_token, match_string_to_pattern

MAX_BUFFER_LENGTH = 64
MAX_STRING_LIST = 32

_RULE_NAME = re.compile(r"[A-Za-z]+[A-Za-z_0-9]*")

_CONTROL_ESCAPES = {
    "\r": "\\r",
    "\n": "\\n",
    "\t": "\\t",
    "\x1b": "\\e",
}


class LexError(ValueError):
    """Raised for a bad rule set or input the lexer cannot handle."""


@dataclass(frozen=True)
class TokenRule:
    """A token type name and the regular expression that recognises it."""

    name: str
    pattern: str

    def __post_init__(self) -> None:
        if not self.pattern:
            raise LexError(f"rule {self.name!r} has no pattern")
        try:
            re.compile(self.pattern)
        except re.error as exc:
            raise LexError(f"rule {self.name!r} has an invalid pattern {self.pattern!r}: {exc}") from exc


def parse_rules(text: str) -> list[TokenRule]:
    """Read rules of the form ``NAME pattern``, one per line.

    Blank lines are ignored; a line that does not begin with a name raises
    :class:`LexError`.
    """
    rules = []
    for number, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        found = _RULE_NAME.match(line)
        if found is None:
            raise LexError(f"line {number}: rule does not start with a token name: {line!r}")
        rules.append(TokenRule(found.group(0), line[found.end():].strip()))
    return rules


class Lexer:
    """Splits a source text into named tokens using an ordered rule set."""

    def __init__(
        self,
        source: str,
        rules: Union[str, Iterable[TokenRule]],
        source_name: Optional[str] = None,
        rules_name: Optional[str] = None,
    ) -> None:
        self.source = source
        self.rules: list[TokenRule] = parse_rules(rules) if isinstance(rules, str) else list(rules)
        self.source_name = source_name
        self.rules_name = rules_name
        self.tokens: list[tuple[str, str]] = []
        self.carat = 0
        self.filelen_expansion = 0
        self.is_control_sequence = False

    @classmethod
    def from_files(cls, source_path: PathLike, rules_path: PathLike) -> Lexer:
        """Build a lexer from a source file and a rules file."""
        return cls(
            read_file(source_path),
            parse_rules(read_file(rules_path)),
            source_name=str(source_path),
            rules_name=str(rules_path),
        )

    def scan(self, text: str) -> Token:
        """Match ``text`` against the rules in order; the first hit wins.

        The returned token is named after the rule, or empty when no rule
        matches.
        """
        for rule in self.rules:
            token = match_string_to_pattern(rule.pattern, text)
            if token.pattern is not None:
                token.token_name = rule.name
                return token
        return empty_token()

    def lex(self) -> bool:
        """Tokenise the source, appending to :attr:`tokens`.

        Characters are added to a buffer while it still matches a rule;
        when it stops matching, the buffer without its last character is
        pushed as a token and that character starts a new buffer. Returns
        True when the text left at the end matched a rule. That last match
        is not pushed.
        """
        buffer: list[str] = []
        pending: Optional[Token] = None
        matched = False
        counted_up_to = -1
        i = 0
        while i < len(self.source):
            self.carat = i
            char = self.source[i]
            piece = _CONTROL_ESCAPES.get(char)
            self.is_control_sequence = piece is not None
            if piece is None:
                piece = char
            elif i > counted_up_to:
                self.filelen_expansion += 1
            counted_up_to = max(counted_up_to, i)
            buffer.append(piece)
            text = "".join(buffer)
            if len(text) > MAX_BUFFER_LENGTH:
                raise LexError(
                    f"buffer {text!r} at position {i} has exceeded {MAX_BUFFER_LENGTH} characters"
                )
            token = self.scan(text)
            if token.pattern is not None:
                matched = True
                pending = token
            elif matched and pending is not None:
                matched = False
                buffer.pop()
                self.push(pending.token_name or "", "".join(buffer))
                buffer = []
                continue
            i += 1
        return matched

    def push(self, token_name: str, literal: str) -> None:
        """Record a lexed token."""
        self.tokens.append((token_name, literal))

    def is_terminal(self, name: str) -> bool:
        """Return True when ``name`` is the name of one of the rules."""
        return any(rule.name == name for rule in self.rules)


def get_string_list(text: str, pattern: str) -> list[str]:
    """Collect the first group of successive matches of ``pattern``.

    After each match the text is advanced by the length of the captured
    string; at most 32 strings are collected.
    """
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise LexError(f"invalid pattern {pattern!r}: {exc}") from exc
    if compiled.groups < 1:
        raise LexError(f"pattern {pattern!r} has no group to capture")
    strings: list[str] = []
    while len(strings) < MAX_STRING_LIST:
        found = compiled.search(text)
        if found is None:
            break
        captured = found.group(1) or ""
        strings.append(captured)
        text = text[len(captured):]
    return strings