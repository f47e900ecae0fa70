from lis import EvaluatorFn
from lis import SExpression, Value
from lis.errors import LisEvalError
from lis.types.symbol import Symbol
from lis.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(tail) != 2:
        raise LisEvalError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LisEvalError(f"set! first argument must be a symbol, got {var_sym!r}")
    # The value is computed before the binding is checked; its effects stick
    # even when var_sym turns out to be unbound.
    value = evaluate_fn(val_expr, env)
    return env.set(var_sym, value)
