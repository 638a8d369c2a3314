# Core type aliases for minilisp's data model.
# Code and runtime values share plain Python types: int, float, Symbol and list.
# There is no separate Cons or boolean type; `t` and `nil` are ordinary symbols.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to the same union since every form is also a value.

from __future__ import annotations

from typing import Callable, Union

from minilisp.types.symbol import Symbol

# Runtime value: Integer | Float | Symbol | List
LispValue = Union[int, float, Symbol, list]
SExpression = LispValue

# Evaluator function type threaded into special forms: (expr, env, depth) -> value
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
