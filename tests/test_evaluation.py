import pytest

from wisp.config import EvalOptions
from wisp.errors import (
    InvalidOperatorError,
    RecursionDepthError,
    ReservedIdentifierError,
    UndefinedIdentifierError,
    WispTypeError,
)
from wisp.evaluation.evaluator import evaluate, reduce
from wisp.types.node import (
    Sequence,
    Definition,
    Lambda,
    Conditional,
    Boolean,
    Number,
    String,
    Identifier,
)
from wisp.types.void import VOID

# -----------------------------------------------------
# Helpers
# -----------------------------------------------------

def seq(*children):
    return Sequence(children)

def ident(name):
    return Identifier(name)

SQUARE = Lambda(("x",), seq(ident("*"), ident("x"), ident("x")))

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

@pytest.mark.parametrize(
    "node",
    [Number(3), Boolean(True), Boolean(False), String("hello"), SQUARE, VOID],
)
def test_terminal_values_reduce_to_themselves(env, node):
    assert reduce(node, env) is node


def test_builtin_identifier_denotes_itself(env):
    plus = ident("+")
    assert reduce(plus, env) is plus


def test_identifier_lookup(env):
    env.define("x", Number(42))
    assert reduce(ident("x"), env) == Number(42)
    with pytest.raises(UndefinedIdentifierError):
        reduce(ident("z"), env)


def test_identifier_substitutes_stored_node_unreduced(env):
    stored = seq(ident("+"), Number(3), Number(4))
    env.define("A", stored)
    assert reduce(ident("A"), env) == stored


def test_definition_stores_value_unreduced_and_yields_void(env):
    value = seq(ident("+"), Number(3), Number(4))
    assert reduce(Definition("A", value), env) is VOID
    assert env.lookup("A") == value


def test_definition_of_builtin_raises(env):
    with pytest.raises(ReservedIdentifierError):
        reduce(Definition("*", Number(1)), env)


def test_empty_sequence_reduces_to_itself(env):
    empty = Sequence(())
    assert reduce(empty, env) is empty


def test_simple_application(env):
    assert reduce(seq(ident("+"), Number(3), Number(4)), env) == Number(7)


def test_nested_application(env):
    expr = seq(ident("+"), Number(3), seq(ident("+"), Number(3), Number(4)))
    assert reduce(expr, env) == Number(10)


def test_lambda_application(env):
    assert reduce(seq(SQUARE, Number(4)), env) == Number(16)


def test_operator_position_is_reduced(env):
    env.define("sq", SQUARE)
    assert reduce(seq(ident("sq"), Number(3)), env) == Number(9)
    assert env.depth == 1


@pytest.mark.parametrize(
    "operator",
    [Number(1), String("f"), Boolean(True), seq()],
)
def test_invalid_operator(env, operator):
    with pytest.raises(InvalidOperatorError):
        reduce(seq(operator, Number(2)), env)


def test_conditional_selects_branch(env):
    assert reduce(Conditional(Boolean(True), Number(3), Number(4)), env) == Number(3)
    assert reduce(Conditional(Boolean(False), Number(3), Number(4)), env) == Number(4)


def test_conditional_requires_boolean(env):
    with pytest.raises(WispTypeError):
        reduce(Conditional(Number(0), Number(3), Number(4)), env)


def test_reduction_does_not_mutate_the_tree(env):
    expr = seq(SQUARE, seq(ident("+"), Number(1), Number(1)))
    before = str(expr)
    reduce(expr, env)
    assert str(expr) == before


def test_compound_definition_is_a_type_error_in_argument_position(env):
    # The stored (+ 3 4) reaches the fold unreduced.
    reduce(Definition("A", seq(ident("+"), Number(3), Number(4))), env)
    with pytest.raises(WispTypeError):
        reduce(seq(ident("+"), ident("A"), Number(1)), env)


def test_first_error_wins(env):
    with pytest.raises(UndefinedIdentifierError, match="first"):
        reduce(seq(ident("+"), ident("first"), ident("second")), env)


def test_depth_bound(env):
    expr = Number(1)
    for _ in range(20):
        expr = seq(ident("+"), expr)
    assert reduce(expr, env) == Number(1)
    with pytest.raises(RecursionDepthError):
        reduce(expr, env, EvalOptions(max_depth=10))


def test_evaluate_shares_environment_between_forms(env):
    evaluate(Definition("n", Number(5)), env)
    assert evaluate(seq(ident("*"), ident("n"), Number(2)), env) == Number(10)


def test_host_stack_exhaustion_is_a_depth_error(env):
    # max_depth set far beyond what the Python stack can hold
    options = EvalOptions(max_depth=100_000)
    evaluate(Definition("f", Lambda(("x",), seq(ident("f"), ident("x")))), env, options)
    with pytest.raises(RecursionDepthError):
        evaluate(seq(ident("f"), Number(1)), env, options)
    assert env.depth == 1
    assert evaluate(seq(ident("+"), Number(1), Number(2)), env, options) == Number(3)


def test_truncate_keeps_global_scope(env):
    env.push_scope()
    env.push_scope()
    env.truncate(0)
    assert env.depth == 1
