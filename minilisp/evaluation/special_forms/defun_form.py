import logging

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispSyntaxError
from minilisp.printer import format_value
from minilisp.types.symbol import Symbol
from minilisp.types.environment import Environment

logger = logging.getLogger(__name__)


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    """
    (defun name (p1 p2 ...) body)
    The body is stored unevaluated; the name symbol is returned.
    """
    if len(tail) != 3:
        raise LispSyntaxError("defun requires exactly 3 arguments: (defun name (params...) body)")

    name, params, body = tail
    if not isinstance(name, Symbol):
        raise LispSyntaxError(f"defun name must be a symbol, got {format_value(name)}")
    # evaluation dispatches on these names before user functions
    from minilisp.evaluation.builtins import BUILTINS
    from minilisp.evaluation.special_forms import SPECIAL_FORMS

    if name in BUILTINS or name in SPECIAL_FORMS:
        raise LispSyntaxError(f"defun cannot redefine built-in {name}")
    if not isinstance(params, list):
        raise LispSyntaxError(f"defun parameters must be a list, got {format_value(params)}")
    for p in params:
        if not isinstance(p, Symbol):
            raise LispSyntaxError(f"defun parameter must be a symbol, got {format_value(p)}")
    if len(set(params)) != len(params):
        raise LispSyntaxError(f"defun {name} has duplicate parameters {format_value(params)}")

    logger.debug("defun %s %s", name, format_value(params))
    return env.define_function(name, params, body)
