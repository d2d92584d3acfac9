

class WispError(Exception):
    """ Base class for all Wisp errors"""
    pass

class ReservedIdentifierError(WispError):
    """ Raised when a builtin operator symbol is used as a binding name"""
    pass

class UndefinedIdentifierError(WispError):
    """ Raised when an identifier is looked up before it is defined"""
    pass

class WispTypeError(WispError):
    """ Raised when a Number or Boolean is required but another node is found"""

class InvalidOperatorError(WispError):
    """ Raised when the operator of an application is neither a builtin nor a lambda"""

class ArityError(WispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class RecursionDepthError(WispError):
    """ Raised when reduction nests deeper than the configured bound"""

class WispSyntaxError(WispError):
    """ Raised when there is a syntax error"""


# Not a WispError: popping the global scope breaks the environment contract
# and must never be reported and skipped like an evaluation failure.
class ScopeUnderflowError(RuntimeError):
    """ Raised when the last (global) scope would be removed"""
