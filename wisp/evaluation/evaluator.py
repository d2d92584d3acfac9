"""Core evaluator for the Wisp interpreter.

Reduces one syntax tree node against an Environment. Special forms
(definition, conditional) are dispatched through SPECIAL_FORMS; sequences are
reduced operator first, then arguments left to right, then handed to apply.
"""

from __future__ import annotations

import logging

from wisp import WispValue
from wisp.builtins import is_builtin
from wisp.config import EvalOptions
from wisp.errors import RecursionDepthError
from wisp.evaluation.apply import apply
from wisp.evaluation.special_forms import SPECIAL_FORMS
from wisp.types.environment import Environment
from wisp.types.node import Node, Sequence, Identifier

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = EvalOptions()


def evaluate(
    node: Node, env: Environment, options: EvalOptions | None = None
) -> WispValue:
    """
    Top-level entry point: reduce one complete form.
    The environment is shared with later calls, so definitions persist.
    """
    logger.debug("evaluate %s", node)
    base = env.depth
    try:
        result = reduce(node, env, options, 0)
    except RecursionError:
        # The host stack ran out before max_depth did; scope pops may have
        # been skipped on the way out.
        env.truncate(base)
        raise RecursionDepthError(
            "Evaluation nested too deeply for the Python stack"
        ) from None
    logger.debug("=> %r", result)
    return result


def reduce(
    node: Node,
    env: Environment,
    options: EvalOptions | None = None,
    depth: int = 0,
) -> WispValue:
    """
    Core evaluator: produce the node that replaces `node` in its tree.
    """
    if options is None:
        options = _DEFAULT_OPTIONS
    if depth > options.max_depth:
        raise RecursionDepthError(
            f"Maximum evaluation depth {options.max_depth} exceeded"
        )

    handler = SPECIAL_FORMS.get(type(node))
    if handler is not None:
        return handler(node, env, reduce, options, depth)

    match node:
        case Identifier(name=name):
            # Builtin symbols denote themselves; apply resolves them.
            if is_builtin(name):
                return node
            # Substituted as stored: the bound node is not reduced again here.
            return env.lookup(name)

        case Sequence(children=()):
            return node

        case Sequence(children=(head, *tail)):
            operator = reduce(head, env, options, depth + 1)
            args = [reduce(arg, env, options, depth + 1) for arg in tail]
            return apply(operator, args, env, reduce, options, depth + 1)

    # --- Boolean, Number, String, Lambda and Void reduce to themselves ---
    return node
