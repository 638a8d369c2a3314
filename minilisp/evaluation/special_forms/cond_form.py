"""Special form: cond, the multi-branch conditional."""

from minilisp import EvaluatorFn, LispValue, SExpression
from minilisp.errors import LispSyntaxError
from minilisp.printer import format_value
from minilisp.types.environment import Environment
from minilisp.types.symbol import NIL, T, is_truthy


def cond_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, depth: int
) -> LispValue:
    """Evaluate (cond (test result) ...).

    Clauses are tried in order: the first whose test is truthy (not nil) has
    its result evaluated and returned. A test that is literally the symbol t
    matches without being evaluated. If no clause matches, return nil.
    Every clause must be a two-element list; shapes are checked before any
    test runs.
    """
    for clause in tail:
        if not isinstance(clause, list) or len(clause) != 2:
            raise LispSyntaxError(
                f"cond clause must be a list of (test result), got {format_value(clause)}"
            )

    for test, result in tail:
        if test == T or is_truthy(evaluate_fn(test, env, depth)):
            return evaluate_fn(result, env, depth)
    return NIL
