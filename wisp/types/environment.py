"""Runtime environment for Wisp.

The Environment is an ordered stack of scopes, each a plain dict from names to
Nodes. The bottom scope is the global scope and is never removed. A scope is
pushed for every function application and popped as soon as the body has been
reduced, so scopes nest strictly (LIFO).
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from typing import Iterator

from wisp.builtins import is_builtin
from wisp.errors import ReservedIdentifierError, ScopeUnderflowError, UndefinedIdentifierError
from wisp.types.node import Node

logger = logging.getLogger(__name__)


class Environment:
    """Stack of name -> Node scopes, innermost last."""

    __slots__ = ("scopes",)

    def __init__(self):
        self.scopes: list[dict[str, Node]] = [{}]

    @classmethod
    def create(cls) -> Environment:
        """A fresh environment holding only an empty global scope."""
        return cls()

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def __len__(self) -> int:
        return len(self.scopes)

    def __contains__(self, name: str) -> bool:
        return any(name in scope for scope in self.scopes)

    def push_scope(self) -> None:
        self.scopes.append({})
        logger.debug("push scope -> depth %d", len(self.scopes))

    def pop_scope(self) -> None:
        """Drop the innermost scope.

        Raises ScopeUnderflowError if only the global scope is left.
        """
        if len(self.scopes) == 1:
            raise ScopeUnderflowError("Cannot pop the global scope")
        self.scopes.pop()
        logger.debug("pop scope -> depth %d", len(self.scopes))

    def truncate(self, depth: int) -> None:
        """Drop every scope above `depth`; the global scope always stays."""
        del self.scopes[max(depth, 1):]

    @contextmanager
    def scope(self) -> Iterator[Environment]:
        """Bracket a push/pop pair; the pop runs even if the body raises."""
        self.push_scope()
        try:
            yield self
        finally:
            self.pop_scope()

    def define(self, name: str, value: Node) -> None:
        """Bind `name` to `value` in the innermost scope.

        An existing binding of `name` in that scope is overwritten; bindings of
        the same name in outer scopes are shadowed, not touched.

        Raises ReservedIdentifierError if `name` is a builtin operator symbol.
        """
        if is_builtin(name):
            raise ReservedIdentifierError(f"Cannot define builtin operator {name}")
        self.scopes[-1][name] = value

    def lookup(self, name: str) -> Node:
        """Return the node bound to `name`, searching innermost scope first.

        Raises UndefinedIdentifierError if no active scope binds it.
        """
        for scope in reversed(self.scopes):
            if name in scope:
                return scope[name]
        raise UndefinedIdentifierError(f"Undefined identifier {name}")

    def _write_scope(self, scope: dict[str, Node], buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in scope.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost scope only, with an indicator for outer scopes."""
        with StringIO() as buffer:
            self._write_scope(self.scopes[-1], buffer)
            if len(self.scopes) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment scopes: ")
            chain = []
            for scope in reversed(self.scopes):
                scope_buf = StringIO()
                self._write_scope(scope, scope_buf)
                chain.append(scope_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
