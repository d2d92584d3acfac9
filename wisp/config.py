from __future__ import annotations
import os
from dataclasses import dataclass


# Defaults
DEFAULT_MAX_DEPTH = 200
DEFAULT_LOG_LEVEL = 'WARNING'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_max_depth() -> int:
    return int_from_env('WISP_MAX_DEPTH', DEFAULT_MAX_DEPTH)


def get_strict_arity() -> bool:
    return flag_from_env('WISP_STRICT_ARITY')


def get_log_level() -> str:
    raw = os.environ.get('WISP_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class EvalOptions:
    """Knobs for one evaluation session.

    max_depth bounds the nesting of reduce calls. strict_arity turns the
    default silent truncation of lambda arguments into an ArityError.
    """
    max_depth: int = DEFAULT_MAX_DEPTH
    strict_arity: bool = False

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    @classmethod
    def from_env(cls) -> EvalOptions:
        return cls(max_depth=get_max_depth(), strict_arity=get_strict_arity())
