"""User-defined function representation for minilisp."""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression
from minilisp.printer import format_value
from minilisp.types.symbol import Symbol


class FunctionDefinition:
    """Parameter names plus a single unevaluated body expression."""

    __slots__ = ("params", "body")

    def __init__(self, params: list[Symbol], body: SExpression):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: SExpression = body

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(format_value(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
