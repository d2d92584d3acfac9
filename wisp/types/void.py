from __future__ import annotations

from dataclasses import dataclass

from wisp.types.node import Node


@dataclass(frozen=True)
class Void(Node):
    """What a definition reduces to: no value at all."""

    def __repr__(self): return "void"
    def __str__(self): return ""
    def __bool__(self): return False


VOID = Void()
