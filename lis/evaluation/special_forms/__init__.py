"""Registry of special forms for the lis evaluator.

Special forms are a closed set. The evaluator maps a head Symbol to a
SpecialForm member and dispatches through SPECIAL_FORMS before falling back to
ordinary application; a name that is not a member is always an application.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from lis import EvaluatorFn, SExpression, Value
from lis.types.environment import Environment
from lis.types.symbol import Symbol
from lis.evaluation.special_forms.quote_form import quote_form
from lis.evaluation.special_forms.if_form import if_form
from lis.evaluation.special_forms.define_form import define_form
from lis.evaluation.special_forms.set_form import set_form
from lis.evaluation.special_forms.lambda_form import lambda_form

SpecialFormHandler = Callable[[list[SExpression], Environment, EvaluatorFn], Value]


class SpecialForm(Enum):
    QUOTE = "quote"
    IF = "if"
    DEFINE = "define"
    SET = "set!"
    LAMBDA = "lambda"

    @classmethod
    def for_symbol(cls, sym: Symbol) -> Optional[SpecialForm]:
        return _BY_SYMBOL.get(sym)


_BY_SYMBOL: dict[Symbol, SpecialForm] = {Symbol(f.value): f for f in SpecialForm}

SPECIAL_FORMS: dict[SpecialForm, SpecialFormHandler] = {
    SpecialForm.QUOTE: quote_form,
    SpecialForm.IF: if_form,
    SpecialForm.DEFINE: define_form,
    SpecialForm.SET: set_form,
    SpecialForm.LAMBDA: lambda_form,
}

_missing = set(SpecialForm) - set(SPECIAL_FORMS)
if _missing:
    raise RuntimeError(f"special forms without a handler: {sorted(f.value for f in _missing)}")
