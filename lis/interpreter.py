from __future__ import annotations

import logging
from typing import Iterator, Optional

from lis import Value
from lis.errors import LisEvalError
from lis.reader.parser import read_all, tokenize
from lis.types.environment import Environment
from lis.evaluation.evaluator import evaluate
from lis.builtin.env_builtin import standard_env

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates lis code against one persistent global environment.
    Each instance is an independent session: definitions made through one
    Interpreter are never visible to another.
    """

    def __init__(self, env: Optional[Environment] = None):
        self.env: Environment = env if env is not None else standard_env()

    def eval_all(self, code: str) -> Iterator[Value]:
        """Evaluate every top-level form in `code`, yielding each result.

        Forms are read lazily, so a syntax error later in `code` surfaces only
        after the earlier forms have been evaluated.
        """
        for expr in read_all(tokenize(code)):
            logger.debug("eval %r", expr)
            try:
                result = evaluate(expr, self.env)
            except RecursionError:
                raise LisEvalError("maximum recursion depth exceeded") from None
            yield result

    def eval(self, code: str) -> Optional[Value]:
        """Evaluate all of `code`; return the last result, or None if blank."""
        result: Optional[Value] = None
        for result in self.eval_all(code):
            pass
        return result
