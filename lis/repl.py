"""
Interactive read-eval-print loop for lis.

Reads one line at a time, evaluates every form on it against a single
Interpreter so that definitions persist across lines, and prints each result.
Errors are reported and the loop carries on; effects made before the error
stay in the session.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from lis import config
from lis.errors import LisError
from lis.interpreter import Interpreter
from lis.printer import to_string

logger = logging.getLogger(__name__)


def eval_line(interp: Interpreter, line: str, out: TextIO, err: TextIO) -> bool:
    """Evaluate one line of input and print its results.

    Returns False if evaluation failed with a LisError or ran out of stack.
    """
    try:
        for result in interp.eval_all(line):
            print(to_string(result), file=out)
    except (LisError, RecursionError) as ex:
        logger.debug("error evaluating %r", line, exc_info=True)
        print(f"error: {ex}", file=err)
        return False
    return True


def repl(
    interp: Optional[Interpreter] = None,
    prompt: Optional[str] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> None:
    interp = interp or Interpreter()
    out = out or sys.stdout
    err = err or sys.stderr
    prompt = config.get_prompt() if prompt is None else prompt
    while True:
        out.write(prompt)
        out.flush()
        try:
            line = sys.stdin.readline()
        except KeyboardInterrupt:
            line = ""
        if not line:
            print(file=out)
            return
        if not line.strip():
            continue
        eval_line(interp, line, out, err)


def main() -> int:
    logging.basicConfig(level=config.get_log_level())
    repl()
    return 0


if __name__ == "__main__":
    sys.exit(main())
