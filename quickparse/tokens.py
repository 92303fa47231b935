"""Tokens and regular-expression matching of strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


@dataclass
class Token:
    """A substring matched by a pattern, with where it was found."""

    literal: Optional[str] = None
    length: int = 0
    pattern: Optional[str] = None
    token_name: Optional[str] = None
    offset: int = 0
    source: Optional[str] = None

    def is_empty(self) -> bool:
        """Return True when no text was matched."""
        return self.literal is None


def empty_token() -> Token:
    """Return a token that matched nothing."""
    return Token()


def match_string_to_pattern(pattern: str, text: str) -> Token:
    """Search ``text`` for ``pattern`` and describe the first match.

    Returns an empty token when there is no match; an invalid pattern
    raises :class:`re.error`.
    """
    found = re.search(pattern, text)
    if found is None:
        return empty_token()
    literal = found.group(0)
    return Token(
        literal=literal,
        length=found.end() - found.start(),
        pattern=pattern,
        token_name=literal,
        offset=found.start(),
        source=text,
    )