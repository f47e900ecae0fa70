"""Runtime environment for lis.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Frames are shared: every closure created
while a frame was current holds a reference to it, as does every call frame
whose `outer` points at it, so a mutation through `set` is seen by all of them.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from lis import Value
from lis.errors import LisEvalError, LisUnboundVariable
from lis.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Value] = {}
        self.outer: Environment | None = outer

    @classmethod
    def extend(
        cls, params: Iterable[Symbol], args: Iterable[Value], outer: Environment
    ) -> Environment:
        """Build a call frame binding `params` positionally to `args`."""
        env = cls(outer)
        for name, value in zip(params, args):
            env.define(name, value)
        return env

    def define(self, name: Symbol, value: Value) -> Value:
        """Bind `name` to `value` in this frame only, overwriting any binding
        already here. Outer frames are never consulted.

        Raises LisEvalError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LisEvalError(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value
        return value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: Value) -> Value:
        """Update an existing binding for `name` in the environment chain.

        The slot is mutated in place in whichever frame owns it.
        Raises LisUnboundVariable if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise LisUnboundVariable(name, f"Cannot set! unbound variable {name}")
        env.vars[name] = value
        return value

    def lookup(self, name: Symbol) -> Value:
        """Look up the value bound to `name`, innermost frame first.

        Raises LisUnboundVariable if not found.
        """
        env = self.find(name)
        if env is None:
            raise LisUnboundVariable(name)
        return env.vars[name]

    def update(self, mapping: dict[Symbol, Value]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Whole chain, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
