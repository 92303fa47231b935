"""A grammar of production rules and a parser that builds a concrete syntax tree."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Protocol, Sequence, Union

from .tokens import Token

MAX_NUM_SEGMENTS = 32
MAX_NUM_ENTRIES_IN_A_SEGMENT = 32

NULL_LEAF_ID = "[ NULL Terminal Node passed to AddLeaf() ]"

_BRACKETS_OPEN = "([{"
_BRACKETS_CLOSE = ")]}"
_ESCAPE = "\\"

Segment = tuple[str, ...]


class _TokenSource(Protocol):
    tokens: list[tuple[str, str]]

    def is_terminal(self, name: str) -> bool: ...


class ParseError(ValueError):
    """Raised for a malformed grammar or a token stream that does not parse."""

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


class ItemType(enum.IntEnum):
    """Whether a collected item is a terminal or a nonterminal."""

    TERMINAL = 0
    NONTERMINAL = 1


@dataclass
class Item:
    """One matched entry of a segment."""

    type: ItemType
    name: str
    payload: Any = None


@dataclass
class Collection:
    """The items gathered while matching a segment."""

    items: list[Item] = field(default_factory=list)

    def push(self, item_type: ItemType, name: str, payload: Any) -> None:
        """Append an item of the given type."""
        self.items.append(Item(ItemType(item_type), name, payload))

    @property
    def count(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)


@dataclass(eq=False)
class CSTNode:
    """A node of the concrete syntax tree."""

    name: str
    is_terminal: bool = False
    literal: Optional[str] = None
    ntid: Optional[str] = None
    terminal: Optional[str] = None
    ancestor: Optional[CSTNode] = field(default=None, repr=False)
    descendants: list[CSTNode] = field(default_factory=list, repr=False)

    @property
    def num_descendants(self) -> int:
        return len(self.descendants)

    def add_node(self, child: CSTNode) -> None:
        """Attach ``child`` below this node."""
        child.ancestor = self
        self.descendants.append(child)

    def add_leaf(self, child: CSTNode) -> None:
        """Attach ``child`` below this node as a terminal leaf."""
        child.is_terminal = True
        if child.terminal is None:
            child.terminal = NULL_LEAF_ID
        child.descendants = []
        child.ancestor = self
        self.descendants.append(child)

    def set_terminal(self, terminal: str, literal: Optional[str]) -> None:
        """Make this node a terminal holding ``literal``."""
        self.terminal = terminal
        self.is_terminal = True
        self.literal = literal
        self.ntid = None
        self.descendants = []


def special_split(text: str, delim: str, max_segments: int = MAX_NUM_SEGMENTS) -> list[str]:
    """Split ``text`` at ``delim`` where it is neither bracketed nor escaped.

    A backslash escapes the character after it; escaped characters stay in
    the pieces as written. Raises :class:`ParseError` when there would be
    more than ``max_segments`` pieces.
    """
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    depth = dict.fromkeys(_BRACKETS_OPEN, 0)
    closing = dict(zip(_BRACKETS_CLOSE, _BRACKETS_OPEN))
    pieces: list[str] = []
    current: list[str] = []
    escaped = False
    for char in text:
        if escaped:
            current.append(char)
            escaped = False
            continue
        if char == _ESCAPE:
            current.append(char)
            escaped = True
            continue
        if char in depth:
            depth[char] += 1
        elif char in closing:
            depth[closing[char]] -= 1
        if char == delim and not any(depth.values()):
            pieces.append("".join(current))
            current = []
            continue
        current.append(char)
    pieces.append("".join(current))
    if len(pieces) > max_segments:
        raise ParseError(f"{len(pieces)} segments exceed the limit of {max_segments}")
    return pieces


@dataclass
class Grammar:
    """Production rules: each nonterminal has an ordered list of segments."""

    names: list[str] = field(default_factory=list)
    rules: dict[str, list[Segment]] = field(default_factory=dict)

    @classmethod
    def from_text(cls, text: str) -> Grammar:
        """Read a grammar.

        A line ending in ``:`` names a nonterminal; the lines after it hold
        its segments, separated by ``|`` and made of space-separated terms.
        """
        grammar = cls()
        current: Optional[str] = None
        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line:
                continue
            if line.endswith(":"):
                name = line[:-1].strip()
                if not name or len(name.split()) != 1:
                    raise ParseError(f"line {number}: bad rule name {line!r}")
                current = name
                if name not in grammar.rules:
                    grammar.names.append(name)
                    grammar.rules[name] = []
                continue
            if current is None:
                raise ParseError(f"line {number}: segments given before any rule name")
            for alternative in special_split(line, "|", MAX_NUM_SEGMENTS):
                terms = tuple(alternative.split())
                if not terms:
                    raise ParseError(f"line {number}: empty segment in rule {current!r}")
                if len(terms) > MAX_NUM_ENTRIES_IN_A_SEGMENT:
                    raise ParseError(
                        f"line {number}: segment has more than "
                        f"{MAX_NUM_ENTRIES_IN_A_SEGMENT} entries"
                    )
                grammar.rules[current].append(terms)
        return grammar

    def index_of(self, nonterminal: str) -> int:
        """Return the position of ``nonterminal``; KeyError when unknown."""
        try:
            return self.names.index(nonterminal)
        except ValueError:
            raise KeyError(nonterminal) from None

    def num_segments(self, nonterminal: str) -> int:
        """Return how many segments ``nonterminal`` has, 0 when unknown."""
        return len(self.rules.get(nonterminal, ()))

    def segment(self, nonterminal: str, number: int) -> Optional[Segment]:
        """Return segment ``number`` of ``nonterminal``, or None."""
        segments = self.rules.get(nonterminal)
        if segments is None or not 0 <= number < len(segments):
            return None
        return segments[number]

    def segments(self) -> Iterator[tuple[str, Segment]]:
        """Yield every (rule name, segment) pair in grammar order."""
        for name in self.names:
            for segment in self.rules[name]:
                yield name, segment


class Parser:
    """Matches a lexer's token stream against a grammar."""

    def __init__(self, lexer: _TokenSource, grammar: Union[Grammar, str]) -> None:
        self.lexer = lexer
        self.grammar = grammar if isinstance(grammar, Grammar) else Grammar.from_text(grammar)
        self.root: Optional[CSTNode] = None
        self._active: set[str] = set()

    def is_terminal(self, name: Optional[str]) -> bool:
        """Return True when ``name`` is a token type of the lexer."""
        return name is not None and self.lexer.is_terminal(name)

    def match(self, token: Token, terminal: Optional[str]) -> bool:
        """Return True when ``token`` is of type ``terminal``."""
        return terminal is not None and token.token_name == terminal

    def recurse(self, token: Token, nonterminal: str, start: int = 0) -> Optional[Collection]:
        """Try the segments of ``nonterminal`` from ``start`` on; the first
        that ``token`` can begin gives the result, else None."""
        if nonterminal in self._active:
            return None
        self._active.add(nonterminal)
        try:
            for number in range(start, self.grammar.num_segments(nonterminal)):
                segment = self.grammar.segment(nonterminal, number)
                if segment is None:
                    break
                collection = self.scan(token, nonterminal, segment)
                if collection is not None:
                    return collection
            return None
        finally:
            self._active.discard(nonterminal)

    def scan(self, token: Token, nonterminal: str, segment: Sequence[str]) -> Optional[Collection]:
        """Return how ``token`` begins ``segment``, or None when it cannot."""
        if not segment:
            return None
        entry = segment[0]
        collection = Collection()
        if self.is_terminal(entry):
            if not self.match(token, entry):
                return None
            collection.push(ItemType.TERMINAL, entry, token)
            return collection
        inner = self.recurse(token, entry)
        if inner is None:
            return None
        collection.push(ItemType.NONTERMINAL, entry, Collection(list(inner.items)))
        return collection

    def push_stack(self, rule: str, tokens: Sequence[tuple[str, str]]) -> CSTNode:
        """Add a node for ``rule`` holding ``tokens`` below the root."""
        if self.root is None:
            self.root = CSTNode("root")
        node = CSTNode(rule, ntid=rule)
        for token_type, literal in tokens:
            child = CSTNode(token_type)
            if self.is_terminal(token_type):
                child.set_terminal(token_type, literal)
                node.add_leaf(child)
            else:
                child.ntid = rule
                node.add_node(child)
        self.root.add_node(node)
        return node

    def parse(self) -> CSTNode:
        """Consume the token stream segment by segment and return the root.

        At each position the segments are tried in grammar order and the
        first whose entries equal the next token types is taken. Raises
        :class:`ParseError` where no segment fits.
        """
        self.root = CSTNode("root")
        tokens = self.lexer.tokens
        position = 0
        while position < len(tokens):
            for name, segment in self.grammar.segments():
                window = tokens[position:position + len(segment)]
                if len(window) == len(segment) and all(
                    token_type == entry for (token_type, _), entry in zip(window, segment)
                ):
                    self.push_stack(name, window)
                    position += len(segment)
                    break
            else:
                raise ParseError(
                    f"failed to complete parsing at token {position}", position=position
                )
        return self.root