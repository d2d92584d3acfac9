import math
from functools import reduce as fold_left

import pytest
from hypothesis import given, strategies as st

from wisp.builtins import BUILTINS, fold
from wisp.errors import ArityError, WispTypeError
from wisp.evaluation.evaluator import evaluate
from wisp.reader import parse
from wisp.types.node import Number, String


def run(source, env):
    result = None
    for expr in parse(source):
        result = evaluate(expr, env)
    return result


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 3 4)", 7),
        ("(* 3 4)", 12),
        ("(/ 3 4)", 0.75),
        ("(- 3 4)", -1),
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3 2)", 2),
        ("(+ 5)", 5),
        ("(- 5)", 5),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(- (+ 10 5) (* 2 3))", 9),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),  # 1 + 2*7*4
        ("(/ (* (+ 8 2) 5) (- 20 10))", 5),
    ]
)
def test_builtin_arithmetic(env, source, expected):
    assert run(source, env) == Number(expected)


def test_results_are_floats(env):
    result = run("(+ 3 4)", env)
    assert isinstance(result.value, float)


def test_division_by_zero_follows_ieee(env):
    assert run("(/ 1 0)", env) == Number(math.inf)
    assert run("(/ (- 0 1) 0)", env) == Number(-math.inf)
    assert math.isnan(run("(/ 0 0)", env).value)


@pytest.mark.parametrize(
    "source",
    [
        '(+ 1 "a")',
        "(+ 1 true)",
        "(* (lambda (x) x) 2)",
        "(- 1 +)",
    ]
)
def test_non_number_arguments_raise_type_error(env, source):
    with pytest.raises(WispTypeError):
        run(source, env)


@pytest.mark.parametrize("symbol", sorted(BUILTINS))
def test_builtins_require_an_argument(env, symbol):
    with pytest.raises(ArityError):
        run(f"({symbol})", env)


def test_fold_reports_argument_position():
    with pytest.raises(WispTypeError, match="Argument 2"):
        fold("+", [Number(1), String("x")])


finite = st.floats(allow_nan=False, allow_infinity=False, width=64)


@given(st.lists(finite, min_size=1, max_size=6))
def test_addition_folds_left_from_first_argument(values):
    expected = fold_left(lambda acc, v: acc + v, values)
    assert fold("+", [Number(v) for v in values]) == Number(expected)


@given(finite, finite)
def test_subtraction_is_first_minus_second(a, b):
    assert fold("-", [Number(a), Number(b)]) == Number(a - b)
