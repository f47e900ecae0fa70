from lis import EvaluatorFn
from lis import SExpression, Value
from lis.errors import LisEvalError
from lis.types.environment import Environment
from lis.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (define name value)
    Binds in the current frame only, even if an outer frame already binds name.
    """
    if len(tail) != 2:
        raise LisEvalError("define requires exactly 2 arguments: (define var value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LisEvalError(f"define first argument must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    return env.define(name, value)
