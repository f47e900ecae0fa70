"""Closure representation and argument binding for lis."""

from __future__ import annotations

from typing import Sequence

from lis import SExpression, Value
from lis.errors import LisArityError
from lis.types.environment import Environment
from lis.types.symbol import Symbol


class Closure:
    """A first-class procedure with formal parameters, one body expression, and
    the environment frame that was current when it was created.

    The frame is held by reference, not copied: later `define`/`set!` in that
    frame are visible to the body.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: Sequence[Symbol], body: SExpression, env: Environment):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: SExpression = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def bind(self, args: list[Value]) -> Environment:
        """
        Bind the given argument values to this closure's formal parameters and
        return a new Environment, whose outer frame is the captured one, for
        evaluating the body.
        """
        if len(args) != self.arity:
            raise LisArityError(
                f"procedure expects {self.arity} arguments, got {len(args)}"
            )
        return Environment.extend(self.params, args, self.env)

    def __str__(self) -> str:
        from lis.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return str(self)
