import logging

from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispSyntaxError
from minilisp.printer import format_value
from minilisp.types.symbol import Symbol
from minilisp.types.environment import Environment

logger = logging.getLogger(__name__)


def setq_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    if len(tail) != 2:
        raise LispSyntaxError("setq requires exactly 2 arguments: (setq var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LispSyntaxError(
            f"setq first argument must be a symbol, got {format_value(var_sym)}"
        )
    value = evaluate_fn(val_expr, env, depth)
    logger.debug("setq %s = %r", var_sym, value)
    return env.set_variable(var_sym, value)
