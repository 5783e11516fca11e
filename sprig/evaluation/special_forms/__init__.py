"""Registry of special forms for the Sprig evaluator.

Maps names to handler functions that implement non-standard evaluation rules.
`register` in sprig.builtin binds each of them in the global frame as a
SpecialForm, so the evaluator recognises them by value rather than by name.
"""

from sprig.evaluation.special_forms.define_form import define_form
from sprig.evaluation.special_forms.if_form import if_form
from sprig.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "define": define_form,
    "lambda": lambda_form,
    "if": if_form,
}
