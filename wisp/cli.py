"""Command-line driver: run a .wsp file, or start a REPL when none is given."""

from __future__ import annotations

import argparse
import logging
import sys

from wisp import __version__
from wisp.config import EvalOptions, get_log_level, get_max_depth, get_strict_arity
from wisp.errors import WispError
from wisp.interpreter import Interpreter
from wisp.types.void import VOID

logger = logging.getLogger(__name__)

PROMPT = "wisp> "


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wisp",
        description="Evaluate Wisp expressions from a file or interactively.",
    )
    parser.add_argument("file", nargs="?", help="file to run (if omitted, starts the REPL)")
    parser.add_argument("--max-depth", type=positive_int, default=None,
                        help="maximum evaluation depth (env: WISP_MAX_DEPTH)")
    parser.add_argument("--strict-arity", action="store_true", default=None,
                        help="reject lambda calls with the wrong number of arguments "
                             "(env: WISP_STRICT_ARITY)")
    parser.add_argument("--log-level", default=None,
                        help="logging level (env: WISP_LOG_LEVEL, default WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_file(interp: Interpreter, path: str) -> int:
    try:
        for result in interp.eval_forms(_read(path)):
            if result is not VOID:
                print(result)
    except WispError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1
    return 0


def _read(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def repl(interp: Interpreter) -> int:
    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        try:
            for result in interp.eval_forms(line):
                if result is not VOID:
                    print(result)
        except WispError as ex:
            print(f"error: {ex}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)

    try:
        level = (args.log_level or get_log_level()).upper()
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
        options = EvalOptions(
            max_depth=args.max_depth if args.max_depth is not None else get_max_depth(),
            strict_arity=args.strict_arity if args.strict_arity is not None else get_strict_arity(),
        )
    except ValueError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 2
    logger.debug("options %s", options)
    interp = Interpreter(options)

    if args.file is not None:
        try:
            return run_file(interp, args.file)
        except OSError as ex:
            print(f"error: cannot read {args.file}: {ex.strerror}", file=sys.stderr)
            return 1
    return repl(interp)
