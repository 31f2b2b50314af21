"""
  Lisp Reader, Lexer and Parser

Two stages: `lex` turns source text into (token_type, token_value) pairs with
a single regular expression, then `TokenStream` parses them by recursive
descent into values:

    - nil / true / false -> Nil / True / False
    - integers           -> int
    - "strings"          -> str (unescaped)
    - :keywords          -> keyword str (marker-prefixed)
    - (...)              -> List
    - [...]              -> Vector
    - {...}              -> HashMap (via hash_map, so keys must be strings)
    - 'x `x ~x ~@x @x    -> (quote x), (quasiquote x), (unquote x),
                            (splice-unquote x), (deref x)
    - ^m x               -> (with-meta x m)
    - anything else      -> Symbol
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from rill import SExpression
from rill.config import resolve, strict_read
from rill.errors import RillEmptyInput, RillSyntaxError
from rill.reader.reader_macros import reader_macros
from rill.types.hash_map import hash_map
from rill.types.keyword import keyword
from rill.types.nil import Nil
from rill.types.sequence import List, Vector
from rill.types.symbol import Symbol

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"[\s,]*(?:"
    r"(?P<splice>~@)"  # splice-unquote
    r"|(?P<special>[\[\]{}()'`~^@])"  # structural punctuation
    r'|(?P<string>"(?:\\.|[^\\"])*"?)'  # strings, possibly unterminated
    r"|(?P<comment>;[^\n]*)"  # line comment
    r"|(?P<atom>[^\s\[\]{}()'\"`~^@,;]+)"  # symbols, numbers, nil/true/false
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"-?\d+")

CLOSERS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}

ESCAPES: dict[str, str] = {"n": "\n", '"': '"', "\\": "\\"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value); comments are dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only separators remain
            break
        pos = m.end()
        if m.lastgroup == "comment":
            continue
        yield m.lastgroup, m.group(m.lastgroup)


def _unescape(token: str) -> str:
    body = token[1:-1]
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), body)


def _is_closed_string(token: str) -> bool:
    if len(token) < 2 or not token.endswith('"'):
        return False
    # The closing quote must not itself be escaped
    backslashes = len(token[1:-1]) - len(token[1:-1].rstrip("\\"))
    return backslashes % 2 == 0


class TokenStream:
    def __init__(self, tokens: Iterator[tuple[str, str]]):
        self.tokens: list[tuple[str, str]] = list(tokens)
        self.pos: int = 0

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if self.pos >= len(self.tokens):
            return None, None
        return self.tokens[self.pos]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        tok = self.peek()
        if tok[0] is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def read_form(self) -> SExpression:
        tok_type, tok_val = self.peek()
        if tok_type is None:
            raise RillSyntaxError("expected form, got end of input")

        if tok_type in ("special", "splice"):
            if reader_macros.is_macro(tok_val):
                self.advance()  # consume the macro token
                return reader_macros.dispatch(tok_val, self)
            if tok_val in CLOSERS:
                return self.read_seq(CLOSERS[tok_val])
            raise RillSyntaxError(f"unexpected '{tok_val}'")

        self.advance()
        return self.read_atom(tok_type, tok_val)

    def read_seq(self, end: str) -> SExpression:
        self.advance()  # opening delimiter
        items: list[SExpression] = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise RillSyntaxError(f"expected '{end}', got end of input")
            if tok_type == "special" and tok_val == end:
                self.advance()
                break
            items.append(self.read_form())

        if end == ")":
            return List(items)
        if end == "]":
            return Vector(items)
        return hash_map(items)

    def read_atom(self, tok_type: str, tok_val: str) -> SExpression:
        if tok_type == "string":
            if not _is_closed_string(tok_val):
                raise RillSyntaxError("expected '\"', got end of input")
            return _unescape(tok_val)
        if tok_val == "nil":
            return Nil
        if tok_val == "true":
            return True
        if tok_val == "false":
            return False
        if INT_RE.fullmatch(tok_val):
            return int(tok_val)
        if tok_val.startswith(":") and len(tok_val) > 1:
            return keyword(tok_val[1:])
        return Symbol(tok_val)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.read_form()


def read_str(source: str, strict: bool | None = None) -> SExpression:
    """Read exactly one form from `source`.

    Raises RillEmptyInput when there are no tokens. Tokens after the first form
    are ignored unless strict reading is on (argument or RILL_STRICT_READ).
    """
    stream = TokenStream(lex(source))
    logger.debug(f"read_str: {len(stream.tokens)} tokens")
    if stream.at_end():
        raise RillEmptyInput("no input")
    form = stream.read_form()
    if not stream.at_end() and resolve(strict, strict_read):
        _, tok_val = stream.peek()
        raise RillSyntaxError(f"unexpected trailing input starting at {tok_val!r}")
    return form


def read_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level form in `source`."""
    return TokenStream(lex(source)).parse_all()
