from __future__ import annotations
import sys


class Symbol:
    """A case-sensitive name. Names are interned, so equal symbols share one
    string object and compare by identity."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


T = Symbol("t")
NIL = Symbol("nil")
QUOTE = Symbol("quote")


def truth(flag: bool) -> Symbol:
    """Map a Python condition onto the language's `t` / `nil` symbols."""
    return T if flag else NIL


def is_truthy(value) -> bool:
    return value != NIL
