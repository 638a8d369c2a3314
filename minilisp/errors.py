from __future__ import annotations

from typing import Any, Optional


class LispError(Exception):
    """ Base class for all minilisp errors.

    Carries a human-readable message plus optional source position (1-based
    line/column) and the offending form, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
        form: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.form = form

    def __str__(self) -> str:
        if self.line is not None and self.column is not None:
            return f"line {self.line}, column {self.column}: {self.message}"
        return self.message


class LispSyntaxError(LispError):
    """ Raised for unbalanced delimiters and malformed special forms"""


class LispUnboundVariable(LispError):
    """ Raised when a variable is looked up before it is bound"""


class LispUndefinedFunction(LispError):
    """ Raised when a form names a function that was never defined"""


class LispArityError(LispError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, name: str, expected: str | int, actual: int, *, form: Any = None):
        super().__init__(
            f"{name} expects {expected} {_noun(expected)}, got {actual}",
            form=form,
        )
        self.name = name
        self.expected = expected
        self.actual = actual


def _noun(expected: str | int) -> str:
    return "argument" if str(expected).split()[-1] == "1" else "arguments"


class LispTypeError(LispError):
    """ Raised when the types of arguments passed to an operator are incorrect"""


class LispDivisionByZero(LispError):
    """ Raised when dividing by an operand equal to zero"""


class LispNumberFormatError(LispError):
    """ Raised when text that must be numeric is not"""


class LispRecursionError(LispError):
    """ Raised when evaluation nests deeper than the configured limit"""
