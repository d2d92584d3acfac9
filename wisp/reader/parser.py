"""
  Wisp Parser

Builds syntax tree nodes from the token stream produced by wisp.reader.lexer:

    - (define NAME VALUE)        -> Definition
    - (lambda (PARAM ...) BODY)  -> Lambda
    - (if PRED THEN ELSE)        -> Conditional
    - (...)                      -> Sequence
    - numbers / strings / true / false / names
                                 -> Number / String / Boolean / Identifier

The shape of each special form is checked here, so the evaluator only ever
sees well-formed definitions, lambdas and conditionals.
"""

from __future__ import annotations

from typing import Iterator, Optional, Iterable

from wisp.errors import WispSyntaxError
from wisp.reader.lexer import lex
from wisp.types.node import (
    Node,
    Sequence,
    Definition,
    Lambda,
    Conditional,
    Boolean,
    Number,
    String,
    Identifier,
)


# Each level of nesting costs three Python frames in the recursive reader.
MAX_NESTING = 200


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]], max_nesting: int = MAX_NESTING):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []
        self.max_nesting = max_nesting
        self.nesting = 0

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Node]:
        """Read one complete form, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "lparen":
            self.advance()
            if self.nesting >= self.max_nesting:
                raise WispSyntaxError(f"Forms nested deeper than {self.max_nesting} levels")
            self.nesting += 1
            try:
                return self._parse_list()
            finally:
                self.nesting -= 1

        if tok_type == "rparen":
            raise WispSyntaxError("Unexpected ')'")

        if tok_type == "keyword":
            raise WispSyntaxError(f"'{tok_val}' may only appear at the head of a form")

        self.advance()
        if tok_type == "number":
            return Number(float(tok_val))
        if tok_type == "string":
            return String(tok_val)
        if tok_type == "boolean":
            return Boolean(tok_val == "true")
        if tok_type == "identifier":
            return Identifier(tok_val)

        raise WispSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def _parse_list(self) -> Node:
        tok_type, tok_val = self.peek()
        if tok_type == "keyword":
            self.advance()
            items = self._parse_items()
            if tok_val == "define":
                return self._make_definition(items)
            if tok_val == "lambda":
                return self._make_lambda(items)
            return self._make_conditional(items)
        return Sequence(self._parse_items())

    def _parse_items(self) -> list[Node]:
        """Read forms up to and including the closing ')'."""
        items = []
        while True:
            tok_type, _ = self.peek()
            if tok_type == "rparen":
                self.advance()
                return items
            if tok_type is None:
                raise WispSyntaxError("Unmatched '('")
            items.append(self.parse_expr())

    @staticmethod
    def _make_definition(items: list[Node]) -> Definition:
        if len(items) != 2:
            raise WispSyntaxError("define requires exactly a name and a value")
        name, value = items
        if not isinstance(name, Identifier):
            raise WispSyntaxError(f"define name must be an identifier, got {name}")
        return Definition(name.name, value)

    @staticmethod
    def _make_lambda(items: list[Node]) -> Lambda:
        if len(items) != 2:
            raise WispSyntaxError("lambda requires exactly a parameter list and a body")
        params, body = items
        if not isinstance(params, Sequence) or not all(
            isinstance(p, Identifier) for p in params.children
        ):
            raise WispSyntaxError(f"lambda parameters must be a list of identifiers, got {params}")
        return Lambda(tuple(p.name for p in params.children), body)

    @staticmethod
    def _make_conditional(items: list[Node]) -> Conditional:
        if len(items) != 3:
            raise WispSyntaxError("if requires a predicate, a then-branch and an else-branch")
        return Conditional(*items)

    def parse_all(self) -> Iterator[Node]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> list[Node]:
    """Parse every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
