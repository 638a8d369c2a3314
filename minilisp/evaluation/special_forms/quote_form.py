from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import LispSyntaxError
from minilisp.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, depth: int
) -> LispValue:
    """(quote expr) returns expr unevaluated."""
    if len(tail) != 1:
        raise LispSyntaxError(f"quote requires exactly 1 argument, got {len(tail)}")
    return tail[0]
