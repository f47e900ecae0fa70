"""
  Lisp Reader: lexer and recursive-descent parser.

Emits plain Python values rather than cons cells:

    - lists    -> Python list
    - integers -> int
    - anything else -> Symbol

There is no literal syntax for booleans, strings or floats. `true` and `false`
are ordinary symbols bound in the global environment.
"""

from __future__ import annotations

import re
from typing import Iterator, Sequence

from lis import SExpression
from lis.errors import LisSyntaxError
from lis.types.symbol import Symbol


# Parens are always tokens of their own; everything else is split on whitespace
TOKEN_RE = re.compile(r"[()]|[^\s()]+")
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def tokenize(source: str) -> list[str]:
    """Split source text into a flat list of token strings."""
    return TOKEN_RE.findall(source)


def atom(token: str) -> SExpression:
    """Integers become ints; every other token is a symbol."""
    if INTEGER_RE.fullmatch(token):
        try:
            return int(token)
        except ValueError:
            # past the host's digit limit for int(); keep the text as a symbol
            pass
    return Symbol(token)


def _read_at(tokens: Sequence[str], pos: int) -> tuple[SExpression, int]:
    if pos >= len(tokens):
        raise LisSyntaxError("unexpected end of input")
    token = tokens[pos]
    pos += 1

    if token == "(":
        items: list[SExpression] = []
        while True:
            if pos >= len(tokens):
                raise LisSyntaxError("unexpected end of input")
            if tokens[pos] == ")":
                return items, pos + 1
            item, pos = _read_at(tokens, pos)
            items.append(item)

    if token == ")":
        raise LisSyntaxError("unexpected close paren")

    return atom(token), pos


def _read_form(tokens: Sequence[str], pos: int) -> tuple[SExpression, int]:
    try:
        return _read_at(tokens, pos)
    except RecursionError:
        raise LisSyntaxError("input nested too deeply") from None


def read(tokens: Sequence[str]) -> tuple[SExpression, list[str]]:
    """Read one expression from `tokens`.

    Returns the expression and the tokens left over, so the caller can read
    successive top-level forms from the same stream.
    """
    expr, pos = _read_form(tokens, 0)
    return expr, list(tokens[pos:])


def read_all(tokens: Sequence[str]) -> Iterator[SExpression]:
    """Yield every top-level expression in `tokens`."""
    pos = 0
    while pos < len(tokens):
        expr, pos = _read_form(tokens, pos)
        yield expr


def parse(source: str) -> SExpression:
    """Read exactly one expression from source text."""
    expr, rest = read(tokenize(source))
    if rest:
        raise LisSyntaxError(f"unexpected trailing input: {' '.join(rest)}")
    return expr


def parse_all(source: str) -> list[SExpression]:
    return list(read_all(tokenize(source)))
