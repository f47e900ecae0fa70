from lis import EvaluatorFn
from lis import SExpression, Value
from lis.errors import LisEvalError
from lis.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(tail) != 3:
        raise LisEvalError("if requires exactly 3 arguments: (if test conseq alt)")
    test, conseq, alt = tail

    # Only the boolean False is falsy; 0, () and symbols all take conseq.
    # `false` is an ordinary binding, so rebinding it changes what tests see.
    if evaluate_fn(test, env) is False:
        return evaluate_fn(alt, env)
    return evaluate_fn(conseq, env)
