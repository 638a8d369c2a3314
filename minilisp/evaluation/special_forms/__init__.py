"""Registry of special forms for the minilisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before built-in operators and user functions;
handlers receive their operands unevaluated.
"""

from minilisp.types.symbol import Symbol, QUOTE
from minilisp.evaluation.special_forms.quote_form import quote_form
from minilisp.evaluation.special_forms.setq_form import setq_form
from minilisp.evaluation.special_forms.defun_form import defun_form
from minilisp.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    QUOTE: quote_form,
    Symbol("setq"): setq_form,
    Symbol("defun"): defun_form,
    Symbol("cond"): cond_form,
}
