# quickparse

A small toolkit for turning source text into tokens and tokens into a
concrete syntax tree. Token types are described by rules of regular
expressions; the grammar is described by production rules whose
alternatives are separated by `|`. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
quickparse SOURCE_FILE RULES_FILE [--tokens]
```

Both file arguments are optional; any that is missing is asked for at a
prompt (end of input at a prompt exits). The command reads the rules
file, lexes the source file and reports whether lexing succeeded.
`--tokens` prints every token that was recorded. Unreadable files and
bad rules are reported on standard error with exit status 1.

## Token rules

Each line of a rules file names a token type and then gives the pattern
that matches it:

```
NUMBER   ^[0-9]+$
SEMI     ^;$
```

The name is the leading identifier on the line (letters first, then
letters, digits or `_`); the rest of the line, trimmed, is the pattern.
Blank lines are skipped; a line that does not start with a name, or a
pattern that does not compile, raises `quickparse.lexer.LexError`.
Rules are tried in file order and the first rule that matches wins.

Patterns are *searched* for anywhere in the text, not matched against
the whole of it, so anchor them with `^` and `$` if a rule should only
accept a complete token.

## Library use

```python
from quickparse.lexer import Lexer, parse_rules

rules = parse_rules("NUMBER ^[0-9]+$\nSEMI ^;$\n")
lexer = Lexer("42;", rules)
ok = lexer.lex()          # True
print(lexer.tokens)       # [('NUMBER', '42')]
```

How `Lexer.lex()` works: characters are added to a buffer while the
buffer still matches some rule. When it stops matching, the buffer
without its last character is recorded as a `(token_name, literal)`
pair in `lexer.tokens`, and that character starts a new buffer.
`lex()` returns `True` when the text left over at the end matched a
rule; that final match is **not** added to `tokens` (above, the `;`).
Carriage return, newline, tab and escape are placed in the buffer as the
two-character sequences `\r`, `\n`, `\t` and `\e`, so rules must match
those forms. A buffer that grows past 64 characters raises `LexError`.

Other members of `Lexer`:

- `Lexer(source, rules, source_name=None, rules_name=None)` takes the
  rules as a string or as a list of `TokenRule(name, pattern)`.
- `Lexer.from_files(source_path, rules_path)` builds a lexer from files.
- `Lexer.scan(text)` returns the `Token` of the first matching rule,
  named after that rule, or an empty token.
- `Lexer.push(token_name, literal)` records a token.
- `Lexer.is_terminal(name)` tells whether a name is a token type.

`quickparse.lexer.get_string_list(text, pattern)` collects the first
group of successive matches of `pattern`, advancing through `text` by
the length of each captured string, up to 32 strings.

Lower-level helpers:

- `quickparse.tokens.match_string_to_pattern(pattern, text)` returns a
  `Token` (`literal`, `length`, `pattern`, `token_name`, `offset`,
  `source`) for the first match of `pattern` in `text`, or an empty
  token (`Token.is_empty()`, also `empty_token()`) when there is none.
- `quickparse.fileutil` offers `read_file(path)`, `read_split(path,
  delim)` returning `FileContents` (`lines`, `line_count`),
  `split(line, delim)` and `getline_file(path, line_number)`, which
  keeps the lines of the last file asked for.
- `quickparse.linkedlist.LinkedList` is a doubly linked list that never
  stores `None`, with `append`, `prepend`, `remove_element`,
  `pop_front`, `pop_back`, `pop`, `iterate`, `iterate_reverse`, `find`,
  `remove`, `clear`, `len()` and iteration in both directions.
  `str_equal` and `str_iequal` are ready-made comparators for `find`
  and `remove`.

## Parsing

A grammar is written as rule names ending in `:`, each followed by lines
of segments. Segments are separated by `|` (not inside brackets, and not
when escaped with `\`), and a segment is a list of space-separated
entries:

```
statement:
NUMBER SEMI | IDENT SEMI
```

```python
from quickparse.parser import Grammar, Parser

grammar = Grammar.from_text(grammar_text)
parser = Parser(lexer, grammar)     # a grammar string is also accepted
root = parser.parse()
```

`Parser.parse()` walks `lexer.tokens` from the start; at each position
it takes the first segment, in grammar order, whose entries equal the
next token types, and adds a `CSTNode` for its rule under a node named
`root`, with one leaf per token. It raises `ParseError` (with
`position`) where no segment fits. A grammar with more than 32 segments
on a line or 32 entries in a segment is rejected with `ParseError`.

`Grammar` exposes `index_of`, `num_segments`, `segment` and `segments`.
`Parser.recurse(token, nonterminal)` and `Parser.scan(token,
nonterminal, segment)` report, as a `Collection` of `Item`s, whether a
single token can begin a nonterminal, following nonterminal entries
down to terminals. `CSTNode` offers `add_node`, `add_leaf` and
`set_terminal`. `special_split(text, delim, max_segments)` is the
bracket- and escape-aware splitter used for segments.

## What it does not do

- `Parser.parse()` matches segment entries against token types only; a
  segment entry that names another rule is not expanded, so the tree it
  builds is one level of rule nodes under the root.
- The `quickparse` command only lexes; it has no option to parse.
- The last token matched at the end of the input is not recorded in
  `lexer.tokens`.