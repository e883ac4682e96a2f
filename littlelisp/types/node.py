"""Syntax tree produced by the reader.

A Node is either an Atom (a tagged terminal) or a ListNode (an ordered tuple
of child nodes). Both are frozen: the evaluator only ever reads the tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union


class AtomKind(str, Enum):
    NUMBER = "number"
    STRING = "string"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Atom:
    kind: AtomKind
    value: int | float | str

    @property
    def is_symbol(self) -> bool:
        return self.kind is AtomKind.SYMBOL

    def __str__(self) -> str:
        if self.kind is AtomKind.STRING:
            return f'"{self.value}"'
        return str(self.value)


@dataclass(frozen=True)
class ListNode:
    children: tuple[Node, ...] = ()

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def __str__(self) -> str:
        return "(" + " ".join(str(c) for c in self.children) + ")"


Node = Union[Atom, ListNode]


def symbol(name: str) -> Atom:
    return Atom(AtomKind.SYMBOL, name)
