from wisp import EvaluatorFn
from wisp import WispValue
from wisp.config import EvalOptions
from wisp.errors import WispTypeError
from wisp.types.environment import Environment
from wisp.types.node import Boolean, Conditional


def if_form(
    node: Conditional,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    options: EvalOptions,
    depth: int,
) -> WispValue:
    cond = evaluate_fn(node.predicate, env, options, depth + 1)
    # No truthiness: the predicate must reduce to a Boolean
    if not isinstance(cond, Boolean):
        raise WispTypeError(f"if predicate must be a boolean, got {cond}")

    # Only the selected branch is ever reduced
    if cond.value:
        return evaluate_fn(node.then_branch, env, options, depth + 1)
    else:
        return evaluate_fn(node.else_branch, env, options, depth + 1)
