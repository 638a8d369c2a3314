"""Core evaluator for the minilisp interpreter.

A direct recursive tree walker: atoms evaluate to themselves, symbols to their
variable binding (or to themselves when unbound), and non-empty lists dispatch
on their head to a special form, a built-in operator or a user function, in
that order. `depth` counts the user-function calls in progress; the limit on
it is enforced where a call is applied.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.errors import LispError, LispTypeError
from minilisp.evaluation.apply import apply_function
from minilisp.evaluation.builtins import BUILTINS
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.printer import format_value
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol


def operator_name(head: SExpression) -> Symbol:
    """The dispatch key of a form: its head symbol, or the head's printed text."""
    if isinstance(head, Symbol):
        return head
    return Symbol(format_value(head))


def evaluate(expr: SExpression, env: Environment, depth: int = 0) -> LispValue:
    match expr:
        case bool():
            raise LispTypeError(f"Cannot evaluate {expr!r}")
        case int() | float():
            return expr
        case Symbol():
            scope = env.find_variable_scope(expr)
            if scope is not None:
                return scope.variables[expr]
            # unbound symbols are self-quoting literals
            return expr
        case []:
            return expr
        case [head, *tail]:
            name = operator_name(head)
            try:
                # --- Special forms: operands are passed unevaluated ---
                special = SPECIAL_FORMS.get(name)
                if special is not None:
                    return special(tail, env, evaluate, depth)

                # --- Built-in operators ---
                builtin = BUILTINS.get(name)
                if builtin is not None:
                    args = []
                    for arg in tail:
                        args.append(evaluate(arg, env, depth))
                    return builtin(env, args)

                # --- User-defined functions ---
                return apply_function(name, tail, env, evaluate, depth)
            except LispError as ex:
                # innermost failing form wins
                if ex.form is None:
                    ex.form = expr
                raise

    raise LispTypeError(f"Cannot evaluate {expr!r}")
