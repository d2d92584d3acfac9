from wisp.reader.lexer import lex
from wisp.reader.parser import TokenStream, parse

__all__ = ["lex", "TokenStream", "parse"]
