from lis import EvaluatorFn
from lis import SExpression, Value
from lis.errors import LisEvalError
from lis.types.environment import Environment


def copy_datum(datum: SExpression) -> SExpression:
    """Fresh list structure for a quoted datum; atoms are immutable and shared."""
    if isinstance(datum, list):
        return [copy_datum(item) for item in datum]
    return datum


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(quote datum) returns datum unevaluated.

    The result never aliases the expression tree, so mutating it cannot
    change a closure body.
    """
    if len(tail) != 1:
        raise LisEvalError("quote requires exactly 1 argument: (quote datum)")
    return copy_datum(tail[0])
