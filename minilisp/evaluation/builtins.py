"""Built-in operators for the minilisp evaluator.

Every operator receives its arguments already evaluated, left to right, and
returns a Lisp value. Predicates answer with the symbols `t` / `nil`.
The evaluator dispatches on the BUILTINS table by operator name before it
falls back to user-defined functions.
"""
from __future__ import annotations

from fractions import Fraction

from minilisp import LispValue
from minilisp.errors import LispArityError, LispDivisionByZero, LispTypeError
from minilisp.printer import format_value
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol, truth


def _is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _check_numbers(name: str, args: list[LispValue]) -> None:
    for x in args:
        if not _is_number(x):
            raise LispTypeError(f"{name} requires numeric arguments, got {format_value(x)}")


def _check_arity(name: str, args: list[LispValue], expected: int) -> None:
    if len(args) != expected:
        raise LispArityError(name, expected, len(args))


def _check_min_arity(name: str, args: list[LispValue], minimum: int) -> None:
    if len(args) < minimum:
        raise LispArityError(name, f"at least {minimum}", len(args))


def _to_float(name: str, value) -> float:
    try:
        return float(value)
    except OverflowError:
        raise LispTypeError(f"{name}: result is out of range for a float")


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; numbers must also agree on Integer vs Float."""
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Sum of all arguments; (+) is 0."""
    _check_numbers("+", args)
    try:
        return sum(args)
    except OverflowError:
        raise LispTypeError("+: result is out of range for a float")


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _check_min_arity("-", args, 1)
    _check_numbers("-", args)
    if len(args) == 1:
        return -args[0]
    try:
        result = args[0]
        for x in args[1:]:
            result -= x
        return result
    except OverflowError:
        raise LispTypeError("-: result is out of range for a float")


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Product of all arguments; (*) is 1."""
    _check_numbers("*", args)
    result = 1
    try:
        for x in args:
            result *= x
        return result
    except OverflowError:
        raise LispTypeError("*: result is out of range for a float")


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left to right; one argument gives its reciprocal as a Float.

    Integer operands are divided exactly, so the result stays an Integer when
    the quotient is whole and becomes a Float otherwise.
    """
    _check_min_arity("/", args, 1)
    _check_numbers("/", args)
    divisors = args[1:] if len(args) > 1 else args
    if any(x == 0 for x in divisors):
        raise LispDivisionByZero(f"Division by zero: {format_value([Symbol('/'), *args])}")

    if len(args) == 1:
        return 1.0 / _to_float("/", args[0])

    if all(isinstance(x, int) for x in args):
        result = Fraction(args[0])
        for x in args[1:]:
            result /= x
        if result.denominator == 1:
            return result.numerator
        return _to_float("/", result)

    result = _to_float("/", args[0])
    try:
        for x in args[1:]:
            result /= _to_float("/", x)
    except OverflowError:
        raise LispTypeError("/: result is out of range for a float")
    return result


# -------------------------------
# Comparison and predicates
# -------------------------------
def lt(env: Environment, args: list[LispValue]) -> Symbol:
    _check_arity("<", args, 2)
    _check_numbers("<", args)
    return truth(args[0] < args[1])


def gt(env: Environment, args: list[LispValue]) -> Symbol:
    _check_arity(">", args, 2)
    _check_numbers(">", args)
    return truth(args[0] > args[1])


def equal(env: Environment, args: list[LispValue]) -> Symbol:
    _check_arity("equal", args, 2)
    return truth(is_equal(args[0], args[1]))


def atom(env: Environment, args: list[LispValue]) -> Symbol:
    """t unless the argument is a non-empty list."""
    _check_arity("atom", args, 1)
    value = args[0]
    return truth(not isinstance(value, list) or not value)


def list_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    return list(args)


BUILTINS = {
    Symbol("+"): add,
    Symbol("-"): sub,
    Symbol("*"): mul,
    Symbol("/"): div,
    Symbol("<"): lt,
    Symbol(">"): gt,
    Symbol("equal"): equal,
    Symbol("atom"): atom,
    Symbol("list"): list_builtin,
}
