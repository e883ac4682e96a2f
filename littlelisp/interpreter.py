"""Entry points: parse text, interpret trees, or drive a persistent session."""

from __future__ import annotations

import logging

from littlelisp import LispValue
from littlelisp.reader.parser import parse, parse_all
from littlelisp.evaluation.evaluator import evaluate
from littlelisp.types.environment import Environment
from littlelisp.types.node import Node
from littlelisp.types.undefined import Undefined
from littlelisp.builtin.env_builtin import register

logger = logging.getLogger(__name__)

__all__ = ["Interpreter", "global_environment", "interpret", "parse"]


def global_environment() -> Environment:
    """Return a fresh root environment holding the built-in table."""
    env = Environment()
    register(env)
    return env


def interpret(node: Node, env: Environment | None = None) -> LispValue:
    """Evaluate a parsed tree, by default against a fresh global environment."""
    if env is None:
        env = global_environment()
    return evaluate(node, env)


class Interpreter:
    """
    A littlelisp session.
    Keeps one global environment across calls to `eval`, so host values
    installed with `define` stay visible.
    """
    def __init__(self, bindings: dict[str, LispValue] | None = None):
        self.env = global_environment()
        if bindings:
            self.env.update(bindings)

    def define(self, name: str, value: LispValue) -> None:
        """Bind a host value or a Python callable fn(env, args) globally."""
        self.env.define(name, value)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level expression in `code`; return the last result."""
        result = Undefined
        for expr in parse_all(code):
            logger.debug("evaluating %s", expr)
            result = evaluate(expr, self.env)
        return result
