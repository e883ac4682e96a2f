"""Built-in procedures for the littlelisp runtime environment.

Each built-in is a plain Python callable taking (env, args) where `args` are
already evaluated. BUILTINS is a read-only table injected into every global
environment by `register`.
"""
from __future__ import annotations

import logging
from types import MappingProxyType

from littlelisp import LispValue, config
from littlelisp.types.lambda_fn import Lambda
from littlelisp.types.undefined import Undefined
from littlelisp.types.environment import Environment
from littlelisp.errors import LispTypeError, LispArityError

logger = logging.getLogger(__name__)


def _single_arg(name: str, args: list[LispValue]) -> LispValue:
    if len(args) != 1:
        raise LispArityError(f"{name} requires exactly 1 argument, got {len(args)}")
    return args[0]


def _list_arg(name: str, args: list[LispValue]) -> list[LispValue]:
    xs = _single_arg(name, args)
    if not isinstance(xs, list):
        raise LispTypeError(f"{name} requires a list, got {to_string(xs)}")
    return xs


def first(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the first element of a list; Undefined for the empty list."""
    xs = _list_arg("first", args)
    return xs[0] if xs else Undefined


def rest(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Return all but the first element of a list; empty for empty or singletons."""
    xs = _list_arg("rest", args)
    return xs[1:]


def to_string(x: LispValue, nested: bool = False) -> str:
    """Convert a value to its printable form.

    Strings print raw at the top level and quoted inside lists.
    """
    if x is Undefined:
        return "undefined"
    if isinstance(x, str):
        return f'"{x}"' if nested else x
    if isinstance(x, list):
        return "(" + " ".join(to_string(item, nested=True) for item in x) + ")"
    if isinstance(x, Lambda):
        return str(x)
    if callable(x):
        return f"#<builtin {getattr(x, '__name__', x)}>"
    return str(x)


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print the printable form of its argument followed by newline; returns it unchanged."""
    x = _single_arg("print", args)
    text = to_string(x)
    logger.debug("print %s", text)
    if config.print_echo_enabled():
        print(text)
    return x


BUILTINS = MappingProxyType(
    {
        "print": print_builtin,
        "first": first,
        "rest": rest,
    }
)


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    env.update(BUILTINS)
