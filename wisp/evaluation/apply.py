"""Application engine for Wisp.

Applies an already-reduced operator to already-reduced arguments:
- builtin operator symbols fold their numeric arguments (wisp.builtins);
- lambdas bind their parameters in a fresh scope and reduce their body.

Lambda bodies see the caller's live scope stack, not a captured one, so free
variables are resolved dynamically at call time.
"""

from __future__ import annotations

from wisp import WispValue, EvaluatorFn
from wisp.builtins import fold, is_builtin
from wisp.config import EvalOptions
from wisp.errors import ArityError, InvalidOperatorError
from wisp.types.environment import Environment
from wisp.types.node import Node, Identifier, Lambda


def apply_lambda(
    fn: Lambda,
    args: list[WispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    options: EvalOptions,
    depth: int,
) -> WispValue:
    """Apply a Wisp Lambda.

    Parameters are paired with arguments positionally. Unless strict arity is
    enabled, a length mismatch truncates to the shorter list: extra arguments
    are ignored and unmatched parameters stay unbound.
    """
    if options.strict_arity and len(fn.parameters) != len(args):
        raise ArityError(
            f"{fn} expects {len(fn.parameters)} argument(s), got {len(args)}"
        )
    with env.scope():
        for name, value in zip(fn.parameters, args):
            env.define(name, value)
        return evaluate_fn(fn.body, env, options, depth + 1)


def apply(
    head: Node,
    args: list[WispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    options: EvalOptions,
    depth: int = 0,
) -> WispValue:
    """Apply either a builtin operator symbol or a Lambda.

    - For a builtin Identifier, fold the arguments.
    - For a Lambda, defer to apply_lambda.
    - Otherwise, raise InvalidOperatorError.
    """
    if isinstance(head, Identifier) and is_builtin(head.name):
        return fold(head.name, args)
    elif isinstance(head, Lambda):
        return apply_lambda(head, args, env, evaluate_fn, options, depth)
    else:
        raise InvalidOperatorError(f"Cannot apply non-function {head}")
