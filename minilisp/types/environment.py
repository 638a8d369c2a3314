"""Runtime environment for minilisp.

An Environment holds two frames of bindings, one for variables and one for
user-defined functions, plus an optional `parent` link. Lookups walk outward
through parents to the root; writes always land in the receiving frame, so an
inner scope shadows rather than mutates an outer binding. Parents never hold
references to their children.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minilisp import LispValue, SExpression
from minilisp.errors import LispUnboundVariable, LispUndefinedFunction
from minilisp.types.function_def import FunctionDefinition
from minilisp.types.symbol import Symbol


class Environment:
    """Chained scope mapping Symbols to values and to function definitions."""

    __slots__ = ("variables", "functions", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        self.variables: dict[Symbol, LispValue] = {}
        self.functions: dict[Symbol, FunctionDefinition] = {}
        self.parent: Environment | None = parent

    def root(self) -> Environment:
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def find_variable_scope(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds variable `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.variables:
                return env
            env = env.parent
        return None

    def find_function_scope(self, name: Symbol) -> Optional[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            if name in env.functions:
                return env
            env = env.parent
        return None

    # --- variables ---
    def get_variable(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises LispUnboundVariable if no scope in the chain binds it.
        """
        env = self.find_variable_scope(name)
        if env is None:
            raise LispUnboundVariable(f"Undefined variable: {name}", form=name)
        return env.variables[name]

    def set_variable(self, name: Symbol, value: LispValue) -> LispValue:
        """Bind `name` in this frame and return `value`."""
        self.variables[name] = value
        return value

    def has_variable(self, name: Symbol) -> bool:
        return self.find_variable_scope(name) is not None

    # --- functions ---
    def define_function(
        self, name: Symbol, params: list[Symbol], body: SExpression
    ) -> Symbol:
        self.functions[name] = FunctionDefinition(params, body)
        return name

    def get_function(self, name: Symbol) -> FunctionDefinition:
        env = self.find_function_scope(name)
        if env is None:
            raise LispUndefinedFunction(f"Undefined function: {name}", form=name)
        return env.functions[name]

    def has_function(self, name: Symbol) -> bool:
        return self.find_function_scope(name) is not None

    def _write_frame(self, buffer: StringIO) -> None:
        """Write this frame's bindings into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.variables.items()))
        if self.functions:
            buffer.write("; ")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.functions.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_frame(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_frame(buffer)
                first = False
                env = env.parent
            buffer.write(">")
            return buffer.getvalue()
