from __future__ import annotations
import sys


class Symbol:
    """An identifier. Evaluates by lookup in code; stays a plain datum under quote.

    Two symbols are equal when their names are, so quoted data compares
    structurally.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Interned: frame lookups hash and compare these constantly
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.id is other.id or self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
