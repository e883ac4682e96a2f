"""Registry of special forms for the littlelisp evaluator.

Maps symbol names to handler functions that implement non-standard evaluation
rules. The evaluator consults this table before ordinary application, so these
names cannot be shadowed by bindings.

Handlers take (tail, env, evaluate_fn) where `tail` is the list of unevaluated
operand nodes following the keyword.
"""

from littlelisp.evaluation.special_forms.lambda_form import lambda_form
from littlelisp.evaluation.special_forms.let_form import let_form
from littlelisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    "lambda": lambda_form,
    "let": let_form,
    "if": if_form,
}
