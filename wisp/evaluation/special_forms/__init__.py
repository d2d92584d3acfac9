"""Registry of special forms for the Wisp evaluator.

Maps node types to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before ordinary reduction.
"""

from wisp.types.node import Definition, Conditional
from wisp.evaluation.special_forms.define_form import define_form
from wisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Definition: define_form,
    Conditional: if_form,
}
