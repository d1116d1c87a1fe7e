"""Differential tests against a recursive-descent reference evaluator.

The reference computes in high precision with mpmath and carries a
running bound on the rounding error that double precision can
accumulate, so the engine's result can be compared strictly.
"""

import re

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st
from mpmath import mp, mpf

from formula_evaluator import evaluate
from formula_tokens import EvaluationError

_TOKEN_RE = re.compile(r"\s*([0-9]+(?:\.[0-9]*)?|\.[0-9]+|[-+*/()])")
_EPS = mpf(2) ** -53


class NearZeroDivisor(Exception):
    """The divisor cannot be told apart from zero in double precision."""


class ReferenceEvaluator:
    """Evaluates ``+ - * /`` with parentheses into ``(value, error_bound)``.

    expr   := term (('+'|'-') term)*
    term   := factor (('*'|'/') factor)*
    factor := number | '(' expr ')'
    """

    def __init__(self, text: str):
        self._tokens = _TOKEN_RE.findall(text)
        self._pos = 0

    def evaluate(self):
        with mp.workdps(60):
            result = self._expr()
            if self._pos != len(self._tokens):
                raise SyntaxError(f"Unexpected token {self._tokens[self._pos]!r}")
            return result

    def _peek(self):
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self):
        tok = self._peek()
        self._pos += 1
        return tok

    def _expr(self):
        a, ea = self._term()
        while self._peek() in ("+", "-"):
            op = self._next()
            b, eb = self._term()
            value = a + b if op == "+" else a - b
            a, ea = value, ea + eb + abs(value) * _EPS
        return a, ea

    def _term(self):
        a, ea = self._factor()
        while self._peek() in ("*", "/"):
            op = self._next()
            b, eb = self._factor()
            if op == "*":
                value = a * b
                err = abs(a) * eb + abs(b) * ea + ea * eb
            else:
                if abs(b) <= 2 * eb:
                    raise NearZeroDivisor()
                value = a / b
                err = (ea + abs(value) * eb) / (abs(b) - eb)
            a, ea = value, err + abs(value) * _EPS
        return a, ea

    def _factor(self):
        tok = self._next()
        if tok == "(":
            result = self._expr()
            if self._next() != ")":
                raise SyntaxError("Missing ')'")
            return result
        if tok is None or tok in "+-*/)":
            raise SyntaxError(f"Unexpected token {tok!r}")
        value = mpf(tok)
        return value, abs(value) * _EPS


def reference(text: str):
    return ReferenceEvaluator(text).evaluate()


literals = st.one_of(
    st.integers(min_value=0, max_value=100).map(str),
    st.tuples(
        st.integers(min_value=0, max_value=100),
        st.integers(min_value=0, max_value=99),
    ).map(lambda p: f"{p[0]}.{p[1]:02d}"),
)


def _combine(children):
    return st.tuples(children, st.sampled_from("+-*/"), children).map(
        lambda t: f"({t[0]}{t[1]}{t[2]})"
    )


fully_parenthesized = st.recursive(literals, _combine, max_leaves=8)


# --- The oracle itself ---

def test_reference_evaluator_sanity():
    value, err = reference("((1+2)*(10/4))")
    assert value == mpf("7.5")
    assert err < mpf("1e-14")


def test_reference_grammar_precedence():
    value, _ = reference("2+3*4-6/2")
    assert value == 11


def test_reference_rejects_zero_divisor():
    with pytest.raises(NearZeroDivisor):
        reference("(1/(2-2))")


# --- Differential property ---

@settings(max_examples=300, deadline=None)
@given(fully_parenthesized)
def test_engine_matches_reference(expr):
    try:
        expected, err = reference(expr)
    except NearZeroDivisor:
        assume(False)

    tolerance = float(2 * err) + 1e-300
    assert evaluate(expr) == pytest.approx(float(expected), rel=1e-12, abs=tolerance)


@settings(max_examples=100, deadline=None)
@given(fully_parenthesized)
def test_engine_is_idempotent(expr):
    try:
        first = evaluate(expr)
    except EvaluationError:
        with pytest.raises(EvaluationError):
            evaluate(expr)
        return
    assert evaluate(expr) == first
