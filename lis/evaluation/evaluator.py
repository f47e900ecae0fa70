"""Core evaluator for the lis interpreter.

`evaluate` is the single dispatch point: symbols are looked up, integers and
booleans evaluate to themselves, lists headed by a special-form name go to the
special form table, and every other non-empty list is an application.
Evaluation is eager, depth first, and left to right. Errors propagate straight
out; bindings made before a failure are kept.
"""

from __future__ import annotations

import logging

from lis import SExpression, Value
from lis.errors import LisEvalError
from lis.types.closure import Closure
from lis.types.environment import Environment
from lis.types.primitive import Primitive
from lis.types.symbol import Symbol
from lis.evaluation.apply import apply
from lis.evaluation.special_forms import SPECIAL_FORMS, SpecialForm

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> Value:
    match expr:
        case Symbol():
            return env.lookup(expr)

        # bool is a subclass of int, so this covers both literals
        case int():
            return expr

        case []:
            raise LisEvalError("empty application")

        case [Symbol() as head, *operands] if (form := SpecialForm.for_symbol(head)) is not None:
            logger.debug("special form %s", form.value)
            return SPECIAL_FORMS[form](operands, env, evaluate)

        case [operator, *operands]:
            fn = evaluate(operator, env)
            args = [evaluate(arg, env) for arg in operands]
            return apply(fn, args, evaluate)

        # Procedure values only show up in hand-built trees
        case Primitive() | Closure():
            return expr

        case _:
            raise LisEvalError(f"cannot evaluate {expr!r}")
