# Core type aliases for lis's data model.
# Runtime values are plain Python objects where one fits and small classes
# where none does:
#   Integer   -> int (never bool)
#   Boolean   -> bool
#   List      -> list
#   Symbol    -> lis.types.symbol.Symbol
#   Primitive -> lis.types.primitive.Primitive
#   Closure   -> lis.types.closure.Closure
# Code and data share one representation, so SExpression and Value are the
# same union under two names.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms.
# - Value: use in evaluator/runtime code to denote evaluated values.

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Union

if TYPE_CHECKING:
    from lis.types.closure import Closure
    from lis.types.primitive import Primitive
    from lis.types.symbol import Symbol

Value = Union[int, bool, "Symbol", list, "Primitive", "Closure"]
SExpression = Value

# Evaluator function type, passed into special forms and the application engine
EvaluatorFn = Callable[..., Any]
