from wisp import EvaluatorFn
from wisp import WispValue
from wisp.builtins import is_builtin
from wisp.config import EvalOptions
from wisp.errors import ReservedIdentifierError
from wisp.types.environment import Environment
from wisp.types.node import Definition
from wisp.types.void import VOID


def define_form(
    node: Definition,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    options: EvalOptions,
    depth: int,
) -> WispValue:
    """
    (define name value)
    The value is stored as written, without reducing it first.
    """
    if is_builtin(node.name):
        raise ReservedIdentifierError(f"Cannot define builtin operator {node.name}")

    env.define(node.name, node.value)
    return VOID
