from lis import EvaluatorFn
from lis import SExpression, Value
from lis.errors import LisEvalError
from lis.types.closure import Closure
from lis.types.environment import Environment
from lis.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    # Exactly one body expression; there is no implicit progn.
    if len(tail) != 2:
        raise LisEvalError("lambda requires exactly 2 arguments: (lambda (params) body)")

    params, body = tail
    if not isinstance(params, list):
        raise LisEvalError(f"lambda parameters must be a list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise LisEvalError(f"lambda parameter must be a symbol, got {p!r}")
    if len(set(params)) != len(params):
        raise LisEvalError("lambda parameters must be distinct")

    return Closure(params, body, env)
