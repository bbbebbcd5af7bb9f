"""Registry of special forms for the Monkey evaluator.

Maps callee names to handlers that receive their arguments unevaluated. The
evaluator consults this table, by the callee identifier's name, before
ordinary function application.
"""

from monkey.evaluation.special_forms.quote_forms import quote_form, unquote_form
from monkey.evaluation.special_forms.eval_form import eval_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "unquote": unquote_form,
    "eval": eval_form,
}
