"""Runtime environment for littlelisp.

The Environment stores bindings of symbol names to evaluated values and
supports nested scopes via an `outer` link. The link is only followed for
lookups; a child never writes into its parent.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from littlelisp import LispValue
from littlelisp.errors import LispTypeError
from littlelisp.types.undefined import Undefined


class Environment:
    """Hierarchical mapping from symbol names to values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        bindings: Mapping[str, LispValue] | None = None,
        outer: Optional[Environment] = None,
    ):
        self.vars: dict[str, LispValue] = dict(bindings) if bindings else {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises LispTypeError if `name` is not a string.
        """
        if not isinstance(name, str):
            raise LispTypeError(f"Cannot define {name!r} as a symbol")
        self.vars[name] = value

    def update(self, mapping: Mapping[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> LispValue:
        """Look up the value bound to `name`, or Undefined when unbound."""
        env = self.find(name)
        if env is None:
            return Undefined
        return env.vars[name]

    def child_with(self, bindings: Mapping[str, LispValue]) -> Environment:
        """Return a new frame whose parent is this one, holding exactly `bindings`."""
        return Environment(bindings, outer=self)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
