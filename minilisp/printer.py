"""Canonical textual form of minilisp values.

The printed form of finite values re-reads to an equal value: integers as decimal digits,
floats via Python's shortest round-trip repr, symbols by name, lists as
parenthesised, space-separated elements.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minilisp import LispValue
from minilisp.types.symbol import Symbol


def _write(value: LispValue, buffer: StringIO) -> None:
    match value:
        case list():
            buffer.write("(")
            for i, item in enumerate(value):
                if i:
                    buffer.write(" ")
                _write(item, buffer)
            buffer.write(")")
        case Symbol():
            buffer.write(value.name)
        case bool():
            raise TypeError(f"Not a minilisp value: {value!r}")
        case int() | float():
            buffer.write(repr(value))
        case _:
            raise TypeError(f"Not a minilisp value: {value!r}")


def format_value(value: Optional[LispValue]) -> str:
    """Render `value`; the absent result (None) prints as nil."""
    if value is None:
        return "nil"
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
