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
from wisp.types.void import Void, VOID
from wisp.types.environment import Environment

__all__ = [
    "Node",
    "Sequence",
    "Definition",
    "Lambda",
    "Conditional",
    "Boolean",
    "Number",
    "String",
    "Identifier",
    "Void",
    "VOID",
    "Environment",
]
