"""Render lis values back into s-expression text."""

from __future__ import annotations

from lis import Value
from lis.types.closure import Closure
from lis.types.primitive import Primitive
from lis.types.symbol import Symbol


def to_string(value: Value) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case Symbol():
            return value.name
        case list():
            return "(" + " ".join(to_string(item) for item in value) + ")"
        case Primitive():
            return f"#<primitive {value.name}>"
        case Closure():
            params = " ".join(p.name for p in value.params)
            return f"#<closure ({params}) {to_string(value.body)}>"
        case _:
            return repr(value)
