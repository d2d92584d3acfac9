from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from wisp import WispValue
from wisp.config import EvalOptions
from wisp.evaluation.evaluator import evaluate
from wisp.reader.lexer import lex
from wisp.reader.parser import TokenStream
from wisp.types.environment import Environment
from wisp.types.void import VOID

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Wisp code.
    Maintains one Environment across calls, so definitions persist.
    """

    def __init__(self, options: EvalOptions | None = None):
        self.options: EvalOptions = options if options is not None else EvalOptions.from_env()
        self.env: Environment = Environment()

    def eval_forms(self, code: str) -> Iterator[WispValue]:
        """Yield the result of each top-level form as it is evaluated."""
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            yield evaluate(expr, self.env, self.options)

    def eval(self, code: str) -> WispValue | list[WispValue]:
        results = list(self.eval_forms(code))
        if not results:
            return VOID
        if len(results) == 1:
            return results[0]
        return results

    def eval_file(self, path: str | Path) -> list[WispValue]:
        path = Path(path)
        logger.info("loading %s", path)
        code = path.read_text(encoding="utf-8")
        return list(self.eval_forms(code))
