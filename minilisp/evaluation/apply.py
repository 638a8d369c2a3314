"""Application of user-defined functions.

A call evaluates its arguments in the caller's environment, checks them
against the definition's parameter count, then evaluates the body once in a
fresh child Environment whose parent is the caller's environment. The child
is dropped when the body returns, so parameter bindings never leak.

`depth` is the number of user-function calls already in progress; a call
that would go past the thread's configured maximum fails with
LispRecursionError.
"""

import logging

from minilisp import EvaluatorFn, LispValue, SExpression
from minilisp.errors import LispArityError, LispRecursionError
from minilisp.runtime_context import get_max_depth
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def apply_function(
    name: Symbol,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
) -> LispValue:
    # Resolve first: an unknown function fails before any argument runs
    fn = env.get_function(name)

    args = []
    for expr in arg_exprs:
        args.append(evaluate_fn(expr, env, depth))

    if len(args) != fn.arity:
        raise LispArityError(f"function {name}", fn.arity, len(args))

    max_depth = get_max_depth()
    if depth >= max_depth:
        raise LispRecursionError(f"Maximum call depth {max_depth} exceeded in {name}")

    call_env = Environment(parent=env)
    for param, value in zip(fn.params, args):
        call_env.set_variable(param, value)

    logger.debug("call %s %r at depth %d", name, args, depth + 1)
    return evaluate_fn(fn.body, call_env, depth + 1)
