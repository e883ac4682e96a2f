"""
  Lisp Reader: Lexer and Parser

- Streaming, lazy lexing: tokens are produced only as the parser asks for them
- Emits a typed tree instead of bare Python values:

    - numbers     -> Atom(NUMBER, int | float)
    - strings     -> Atom(STRING, str), quotes stripped, no escape processing
    - other words -> Atom(SYMBOL, str)
    - lists       -> ListNode(children)
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, NamedTuple, Optional

from littlelisp import LispValue
from littlelisp.errors import LispLexError, LispSyntaxError
from littlelisp.types.node import Atom, AtomKind, ListNode, Node

logger = logging.getLogger(__name__)


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"[^"]*")'  # double-quoted strings, taken verbatim
    r'|(?P<unterminated>")'  # opening quote with no closing quote
    r'|(?P<word>[^\s()"]+)'  # fallback: numbers and symbols
    r")"
)

NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
INTEGER_RE = re.compile(r"[+-]?\d+")


class Token(NamedTuple):
    type: str
    value: str
    pos: int


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(type, value, pos) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only whitespace left
            break
        kind = m.lastgroup
        start = m.start(kind)
        if kind == "unterminated":
            raise LispLexError(
                f"Unterminated string literal at position {start}", position=start
            )
        value = m.group(kind)
        if kind == "string":
            value = value[1:-1]
        yield Token(kind, value, start)
        pos = m.end()


def atom_from_word(word: str) -> Atom:
    """Classify a bare word as a number or a symbol."""
    if INTEGER_RE.fullmatch(word):
        return Atom(AtomKind.NUMBER, int(word))
    if NUMBER_RE.fullmatch(word):
        return Atom(AtomKind.NUMBER, float(word))
    return Atom(AtomKind.SYMBOL, word)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> Optional[Node]:
        """Parse one expression, or return None at end of input."""
        tok = self.peek()
        if tok is None:
            return None

        if tok.type == "word":
            self.advance()
            return atom_from_word(tok.value)

        if tok.type == "string":
            self.advance()
            return Atom(AtomKind.STRING, tok.value)

        if tok.type == "lparen":
            self.advance()
            children: list[Node] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispSyntaxError(
                        f"Unterminated list opened at position {tok.pos}",
                        position=tok.pos,
                    )
                if nxt.type == "rparen":
                    self.advance()
                    break
                children.append(self.parse_expr())
            return ListNode(tuple(children))

        if tok.type == "rparen":
            raise LispSyntaxError(
                f"Unmatched ')' at position {tok.pos}", position=tok.pos
            )

        raise LispSyntaxError(f"Unknown token: {tok.type} {tok.value!r}", position=tok.pos)

    def parse_all(self) -> Iterator[Node]:
        while True:
            expr = self.parse_expr()
            if expr is None:
                break
            yield expr


def parse(source: str) -> Node:
    """Read the first complete expression from `source`.

    Input after that expression is never lexed.
    """
    expr = TokenStream(lex(source)).parse_expr()
    if expr is None:
        raise LispSyntaxError("Empty input: expected an atom or a list", position=len(source))
    logger.debug("parsed %s", expr)
    return expr


def parse_all(source: str) -> Iterator[Node]:
    """Yield every top-level expression in `source`, in order."""
    return TokenStream(lex(source)).parse_all()


def to_data(node: Node) -> LispValue:
    """Flatten a tree into raw values: atoms to their value, lists to Python lists."""
    if isinstance(node, ListNode):
        return [to_data(child) for child in node]
    return node.value
