"""Application engine for lis.

Centralizes procedure application for the evaluator:
- Primitives are called with the evaluated argument list and check their own
  arity and argument types.
- Closures bind their parameters in a fresh frame whose outer link is the
  captured frame, then evaluate their single body expression there.
"""

from __future__ import annotations

import logging

from lis import EvaluatorFn, Value
from lis.errors import LisTypeError
from lis.types.closure import Closure
from lis.types.primitive import Primitive

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """Apply a Closure to already evaluated arguments.

    Raises LisArityError if the argument count differs from the parameter count.
    """
    call_env = fn.bind(args)
    logger.debug("apply closure %s to %r", fn, args)
    return evaluate_fn(fn.body, call_env)


def apply(head: Value, args: list[Value], evaluate_fn: EvaluatorFn) -> Value:
    """Apply either a Primitive or a Closure; anything else is not callable."""
    match head:
        case Primitive():
            return head(args)
        case Closure():
            return apply_closure(head, args, evaluate_fn)
        case _:
            from lis.printer import to_string
            raise LisTypeError(f"not callable: {to_string(head)}")
