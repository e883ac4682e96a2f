"""Closure representation and argument binding for littlelisp."""

from __future__ import annotations

from io import StringIO

from littlelisp import LispValue
from littlelisp.types.environment import Environment
from littlelisp.types.node import Node
from littlelisp.errors import LispArityError


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[str], body: Node, env: Environment):
        self.formals: list[str] = formals
        self.body: Node = body
        # The live defining environment, not a copy
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.formals))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values positionally to this lambda's formal
        parameters and return a new Environment, parented on the captured
        one, for evaluating the body.
        """
        if len(args) != len(self.formals):
            raise LispArityError(
                f"{self} expects {len(self.formals)} argument(s), got {len(args)}"
            )
        return self.env.child_with(dict(zip(self.formals, args)))
