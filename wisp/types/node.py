"""Syntax tree nodes for Wisp.

Nodes are immutable once constructed: reduction never edits a node in place,
it returns a new node that takes the old one's position in the tree. Each
variant renders back to source text through ``str()``.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from decimal import Decimal
from io import StringIO


class Node:
    """Base class of every syntax tree variant."""

    __slots__ = ()


@dataclass(frozen=True)
class Sequence(Node):
    """An application ``(op arg ...)``; the empty sequence is ``()``."""

    children: tuple[Node, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    def __str__(self) -> str:
        return "(" + " ".join(str(c) for c in self.children) + ")"


@dataclass(frozen=True)
class Definition(Node):
    name: str
    value: Node

    def __str__(self) -> str:
        return f"(define {self.name} {self.value})"


@dataclass(frozen=True)
class Lambda(Node):
    parameters: tuple[str, ...]
    body: Node

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(self.parameters))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()


@dataclass(frozen=True)
class Conditional(Node):
    predicate: Node
    then_branch: Node
    else_branch: Node

    def __str__(self) -> str:
        return f"(if {self.predicate} {self.then_branch} {self.else_branch})"


@dataclass(frozen=True)
class Boolean(Node):
    value: bool

    def __post_init__(self):
        object.__setattr__(self, "value", bool(self.value))

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Number(Node):
    """A 64-bit float.

    Integral values print without a fractional part and others in positional
    notation, so finite non-negative results read back unchanged. inf and nan
    print as such and have no literal form.
    """

    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        v = self.value
        if not math.isfinite(v):
            return repr(v)
        if v.is_integer():
            return str(int(v))
        # Shortest round-tripping digits, without an exponent
        return format(Decimal(repr(v)), "f")


@dataclass(frozen=True)
class String(Node):
    value: str

    def __str__(self) -> str:
        escaped = (
            self.value.replace("\\", "\\\\")
            .replace('"', '\\"')
            .replace("\n", "\\n")
            .replace("\t", "\\t")
        )
        return f'"{escaped}"'


@dataclass(frozen=True)
class Identifier(Node):
    name: str

    def __post_init__(self):
        # Intern to keep repeated lookups of the same name cheap
        object.__setattr__(self, "name", sys.intern(self.name))

    def __str__(self) -> str:
        return self.name
