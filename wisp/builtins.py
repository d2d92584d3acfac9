"""The fixed set of builtin arithmetic operators.

BUILTINS is the single table of reserved operator symbols. The environment
consults it to refuse redefinition and the apply step consults it to dispatch.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from wisp.errors import ArityError, WispTypeError
from wisp.types.node import Node, Number

# Binary step of a fold: (accumulator, argument) -> new accumulator
StepFunction = Callable[[float, float], float]


def _divide(acc: float, arg: float) -> float:
    # 64-bit float semantics: x/0 is a signed infinity and 0/0 is nan
    if arg == 0.0:
        if acc == 0.0 or math.isnan(acc):
            return math.nan
        return math.copysign(math.inf, acc) * math.copysign(1.0, arg)
    return acc / arg


BUILTINS: dict[str, StepFunction] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def is_builtin(name: str) -> bool:
    return name in BUILTINS


def fold(symbol: str, args: list[Node]) -> Number:
    """Apply the builtin `symbol` across `args` as a left fold.

    The first argument seeds the accumulator; each following argument is
    folded in as ``acc OP arg``, so (- 3 4) is -1 and (/ 3 4) is 0.75.
    """
    step = BUILTINS[symbol]
    if not args:
        raise ArityError(f"{symbol} requires at least 1 argument")
    values: list[float] = []
    for position, arg in enumerate(args, start=1):
        if not isinstance(arg, Number):
            raise WispTypeError(
                f"Argument {position} to {symbol} must be a number, got {arg}"
            )
        values.append(arg.value)
    acc = values[0]
    for value in values[1:]:
        acc = step(acc, value)
    return Number(acc)
