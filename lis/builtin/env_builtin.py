"""Built-in bindings for the lis global environment.

The global frame holds `true`, `false` and the primitive procedures. `true` and
`false` are plain bindings, not syntax; programs may rebind them.
"""
from __future__ import annotations

from lis import Value
from lis.errors import LisTypeError
from lis.types.environment import Environment
from lis.types.primitive import Primitive
from lis.types.symbol import Symbol


def is_integer(value: Value) -> bool:
    """True for Integer values; booleans are not integers here."""
    return isinstance(value, int) and not isinstance(value, bool)


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Value]) -> Value:
    """Return the sum of exactly two integers."""
    a, b = args
    if not (is_integer(a) and is_integer(b)):
        raise LisTypeError("+ requires two integers")
    return a + b


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> Environment:
    env.update({
        Symbol('true'): True,
        Symbol('false'): False,
        Symbol('+'): Primitive('+', 2, add),
    })
    return env


def standard_env() -> Environment:
    """A fresh global environment with every builtin bound."""
    return register(Environment())
