# Core type aliases for littlelisp's data model.
# Source code is a tree of Atom / ListNode (see littlelisp.types.node).
# Runtime values are plain Python types: int, float, str, list, plus Lambda
# closures, Python callables for built-ins and the Undefined marker.
#
# Naming guidance:
# - Node:      Use in reader/evaluator code to denote parsed syntax.
# - LispValue: Use in evaluator/runtime code to denote evaluated values.

import logging
from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Evaluator function type: Python evaluator passed into special forms
EvaluatorFn = Callable[..., LispValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from littlelisp import config  # noqa: E402

logging.getLogger(__name__).setLevel(config.get_log_level())

from littlelisp.types.node import Atom, AtomKind, ListNode, Node  # noqa: E402
from littlelisp.types.undefined import Undefined  # noqa: E402
from littlelisp.reader.parser import parse, parse_all, to_data  # noqa: E402
from littlelisp.interpreter import Interpreter, interpret  # noqa: E402

__all__ = [
    "Atom",
    "AtomKind",
    "Interpreter",
    "ListNode",
    "LispValue",
    "Node",
    "Undefined",
    "interpret",
    "parse",
    "parse_all",
    "to_data",
]
