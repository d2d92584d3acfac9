"""
  Wisp Lexer

Splits source text into (token_type, token_value) tuples:

    - lparen / rparen  -> ( and )
    - string           -> "..." with \\" \\\\ \\n \\t escapes (value is unescaped)
    - number           -> unsigned decimal, e.g. 3 or 4.25
    - boolean          -> true / false
    - keyword          -> define / lambda / if
    - identifier       -> letters, digits, _ and the operator characters + - * /,
                          not starting with a digit

Whitespace separates tokens and ';' starts a comment running to end of line.
A run of characters that fits none of the above is a syntax error, so "4add"
and "???" are rejected rather than split.
"""

from __future__ import annotations

import re
from typing import Iterator

from wisp.errors import WispSyntaxError


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<space>\s+)"  # whitespace
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # an opening quote with no close
    r"|(?P<atom>[^\s();\"]+)"  # anything else up to a delimiter
)

NUMBER_RE = re.compile(r"\d+(?:\.\d+)?", re.ASCII)
IDENTIFIER_RE = re.compile(r"[A-Za-z_/*+\-][0-9A-Za-z_/*+\-]*")

KEYWORDS = frozenset({"define", "lambda", "if"})
BOOLEANS = frozenset({"true", "false"})

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def unescape(body: str) -> str:
    """Resolve backslash escapes inside a string literal body."""
    def _sub(m: re.Match) -> str:
        ch = m.group(1)
        if ch not in ESCAPES:
            raise WispSyntaxError(f"Unknown escape sequence \\{ch}")
        return ESCAPES[ch]
    return _ESCAPE_RE.sub(_sub, body)


def classify(atom: str, pos: int) -> tuple[str, str]:
    if atom in KEYWORDS:
        return "keyword", atom
    if atom in BOOLEANS:
        return "boolean", atom
    if NUMBER_RE.fullmatch(atom):
        return "number", atom
    if IDENTIFIER_RE.fullmatch(atom):
        return "identifier", atom
    raise WispSyntaxError(f"Invalid token at {pos}: {atom!r}")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        kind = m.lastgroup
        text = m.group()
        if kind == "unterminated":
            raise WispSyntaxError(f"Unterminated string starting at {pos}")
        if kind == "lparen" or kind == "rparen":
            yield kind, text
        elif kind == "string":
            yield "string", unescape(text[1:-1])
        elif kind == "atom":
            yield classify(text, pos)
        pos = m.end()
