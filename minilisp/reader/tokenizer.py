"""
  Lisp tokenizer

Splits source text into tokens carrying the 1-based line and column at which
they start. Only three characters are delimiters:

    (  )  '

Each is always a token of its own, whatever surrounds it. Whitespace ends the
token being accumulated and is otherwise discarded; every other character is
accumulated. Numeric vs. symbolic classification is left to the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

DELIMITERS = frozenset("()'")


@dataclass(frozen=True)
class Token:
    value: str
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        return self.value


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(value, line, column) in source order."""
    line = 1
    column = 1
    buffer: list[str] = []
    start_column = 1

    for ch in source:
        if ch == "\n":
            if buffer:
                yield Token("".join(buffer), line, start_column)
                buffer.clear()
            line += 1
            column = 1
            continue

        if ch in DELIMITERS:
            if buffer:
                yield Token("".join(buffer), line, start_column)
                buffer.clear()
            yield Token(ch, line, column)
            column += 1
            continue

        if ch.isspace():
            if buffer:
                yield Token("".join(buffer), line, start_column)
                buffer.clear()
            column += 1
            continue

        if not buffer:
            start_column = column
        buffer.append(ch)
        column += 1

    if buffer:
        yield Token("".join(buffer), line, start_column)


def tokenize(source: str) -> list[Token]:
    return list(lex(source))


def token_values(source: str) -> list[str]:
    """Position-free variant of tokenize: just the token texts."""
    return [tok.value for tok in lex(source)]
