"""Core tree-walking evaluator for littlelisp.

Dispatches on node shape: literal atoms, symbol lookups, special forms,
procedure invocation, and plain data lists.
"""

from __future__ import annotations

import logging

from littlelisp import LispValue
from littlelisp.errors import LispTypeError
from littlelisp.types.environment import Environment
from littlelisp.types.node import Atom, AtomKind, ListNode, Node
from littlelisp.evaluation.apply import apply, is_applicable
from littlelisp.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: Node, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Atom(kind=AtomKind.SYMBOL, value=name):
            return env.lookup(name)

        case Atom(value=value):
            return value

        case ListNode(children=()):
            return []

        case ListNode(children=(Atom(kind=AtomKind.SYMBOL, value=name), *tail)) if name in SPECIAL_FORMS:
            logger.debug("special form %s", name)
            return SPECIAL_FORMS[name](tail, env, evaluate)

        case ListNode(children=children):
            values = [evaluate(child, env) for child in children]
            head, *args = values
            # A list is an invocation only when its head evaluates to a procedure
            if is_applicable(head):
                return apply(head, args, env, evaluate)
            return values

    raise LispTypeError(f"Not a syntax node: {expr!r}")
