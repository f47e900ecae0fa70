"""Native procedure values."""

from __future__ import annotations

from typing import Callable

from lis import Value
from lis.errors import LisTypeError


class Primitive:
    """A host function with a fixed arity, callable from lis code.

    The wrapped function receives the already evaluated arguments as a list and
    is responsible for checking their types; the arity is checked here.
    """

    __slots__ = ("name", "arity", "fn")

    def __init__(self, name: str, arity: int, fn: Callable[[list[Value]], Value]):
        self.name = name
        self.arity = arity
        self.fn = fn

    def __call__(self, args: list[Value]) -> Value:
        if len(args) != self.arity:
            raise LisTypeError(
                f"{self.name} expects {self.arity} arguments, got {len(args)}"
            )
        return self.fn(args)

    def __repr__(self) -> str:
        return f"#<primitive {self.name}>"
