import sys

import pytest
from hypothesis import given, strategies as st

from lis.errors import LisSyntaxError
from lis.printer import to_string
from lis.reader.parser import INTEGER_RE, parse, parse_all, read, read_all, tokenize
from lis.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", []),
        ("   \n\t ", []),
        ("a", ["a"]),
        ("(a b c)", ["(", "a", "b", "c", ")"]),
        ("(+ 1 2)", ["(", "+", "1", "2", ")"]),
        ("((a)(b))", ["(", "(", "a", ")", "(", "b", ")", ")"]),
        ("  (define   x\n 10)  ", ["(", "define", "x", "10", ")"]),
        ("(set! a -20)", ["(", "set!", "a", "-20", ")"]),
    ]
)
def test_tokenize(source, expected):
    assert tokenize(source) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("+7", 7),
        ("a", Symbol("a")),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("12abc", Symbol("12abc")),
        ("3.14", Symbol("3.14")),
        ("true", Symbol("true")),
        ("()", []),
        ("(1)", [1]),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("(quote (b))", [Symbol("quote"), [Symbol("b")]]),
        ("((a b) (c d))", [[Symbol("a"), Symbol("b")], [Symbol("c"), Symbol("d")]]),
    ]
)
def test_parse(source, expected):
    assert parse(source) == expected


def test_booleans_are_not_parsed_as_literals():
    result = parse("(if true 1 2)")
    assert result[1] == Symbol("true")
    assert result[1] is not True


def test_read_returns_leftover_tokens():
    expr, rest = read(tokenize("(+ 1 2) (define a 10) x"))
    assert expr == [Symbol("+"), 1, 2]
    assert rest == ["(", "define", "a", "10", ")", "x"]

    expr, rest = read(rest)
    assert expr == [Symbol("define"), Symbol("a"), 10]
    assert rest == ["x"]

    expr, rest = read(rest)
    assert expr == Symbol("x")
    assert rest == []


def test_read_all_successive_forms():
    assert list(read_all(tokenize("1 (2) a"))) == [1, [2], Symbol("a")]
    assert parse_all("") == []


@pytest.mark.parametrize(
    "source, message",
    [
        ("", "unexpected end of input"),
        ("(1", "unexpected end of input"),
        ("((1 2)", "unexpected end of input"),
        (")", "unexpected close paren"),
        ("(1))", "unexpected trailing input"),
        ("1 2", "unexpected trailing input"),
    ]
)
def test_parse_errors(source, message):
    with pytest.raises(LisSyntaxError, match=message):
        parse(source)


def test_read_with_no_tokens():
    with pytest.raises(LisSyntaxError):
        read([])


def test_read_all_stray_close_paren():
    with pytest.raises(LisSyntaxError):
        list(read_all(tokenize("1 )")))


@pytest.mark.parametrize("source", ["(1 2)", "(1 (2))", "()", "(a (b (c 1) -2) ())"])
def test_parse_print_roundtrip(source):
    assert to_string(parse(source)) == source


# -------------------------------
# Strategies
# -------------------------------
symbol_strat = st.text(
    st.characters(whitelist_categories=("Ll", "Lu", "Nd"),
                  whitelist_characters="-_!?*+<>="),
    min_size=1, max_size=10
).filter(lambda s: not INTEGER_RE.fullmatch(s)).map(Symbol)

integer_strat = st.integers(min_value=-10**12, max_value=10**12)

sexpr_strat = st.recursive(
    st.one_of(symbol_strat, integer_strat),
    lambda children: st.lists(children, max_size=5),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(sexpr_strat)
def test_printed_expression_reads_back(sexpr):
    assert parse(to_string(sexpr)) == sexpr


@given(st.text(alphabet="() ab12-\n", max_size=30))
def test_reader_fails_only_with_syntax_errors(source):
    try:
        parse_all(source)
    except LisSyntaxError:
        pass


@pytest.mark.skipif(
    not hasattr(sys, "set_int_max_str_digits"), reason="no int digit limit on this host"
)
def test_integer_past_digit_limit_reads_as_symbol():
    old_limit = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    try:
        token = "1" * 5000
        assert parse(token) == Symbol(token)
        assert parse(f"(+ {token} 1)")[1] == Symbol(token)
    finally:
        sys.set_int_max_str_digits(old_limit)


def test_deep_nesting_is_a_syntax_error():
    depth = sys.getrecursionlimit() * 3
    with pytest.raises(LisSyntaxError, match="nested too deeply"):
        parse("(" * depth + ")" * depth)
    with pytest.raises(LisSyntaxError, match="nested too deeply"):
        parse_all("1 " + "(" * depth + ")" * depth)
