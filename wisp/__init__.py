# Core type aliases for Wisp's data model.
# Code and runtime values share one representation: immutable Node objects
# (see wisp.types.node). A reduced form is just another Node.
#
# Naming guidance:
# - Node:        Use in reader/parser code to denote syntactic forms.
# - WispValue:   Use in evaluator/runtime code to denote reduced values.
# Both aliases resolve to the same Node base class and are interchangeable.

from typing import Callable

from wisp.types.node import Node

__version__ = "0.1.0"

# Runtime value alias
WispValue = Node

# Evaluator function type: reducer passed into special forms and apply
EvaluatorFn = Callable[..., WispValue]
