"""
  Lisp Parser

Recursive descent over the token stream produced by the tokenizer, with one
token of lookahead. Emits plain Python values:

    - integers -> int
    - decimal numbers -> float
    - everything else -> Symbol (case-sensitive)
    - lists -> Python list
    - 'x -> [quote, x]
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional, Union

from minilisp import SExpression
from minilisp.errors import LispNumberFormatError, LispSyntaxError
from minilisp.reader.tokenizer import Token, lex
from minilisp.types.symbol import QUOTE, Symbol

INTEGER_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)(?:[eE][+-]?[0-9]+)?")

TokenSource = Union[str, Iterable[Union[Token, str]]]


def parse_number(text: str) -> int | float:
    """Strict numeric conversion: int for base-10 integers, float for decimals."""
    if INTEGER_RE.fullmatch(text):
        return int(text)
    if FLOAT_RE.fullmatch(text):
        return float(text)
    raise LispNumberFormatError(f"Cannot convert {text!r} to a number")


def classify_atom(text: str) -> SExpression:
    try:
        return parse_number(text)
    except LispNumberFormatError:
        return Symbol(text)


def _as_token(tok: Union[Token, str]) -> Token:
    return tok if isinstance(tok, Token) else Token(tok)


class TokenStream:
    def __init__(self, tokens: Iterable[Union[Token, str]]):
        self.tokens: list[Token] = [_as_token(t) for t in tokens]
        self.position = 0

    def peek(self) -> Optional[Token]:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.position += 1
        return tok

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise LispSyntaxError("Unexpected end of input")

        if tok.value == "(":
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispSyntaxError(
                        "Missing closing delimiter ')'", line=tok.line, column=tok.column
                    )
                if nxt.value == ")":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok.value == ")":
            raise LispSyntaxError(
                "Unexpected closing delimiter ')'", line=tok.line, column=tok.column
            )

        if tok.value == "'":
            if self.peek() is None:
                raise LispSyntaxError(
                    "Quote is missing its expression", line=tok.line, column=tok.column
                )
            return [QUOTE, self.parse_expr()]

        return classify_atom(tok.value)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def _stream(source: TokenSource) -> TokenStream:
    if isinstance(source, str):
        return TokenStream(lex(source))
    return TokenStream(source)


def parse(source: TokenSource) -> Optional[SExpression]:
    """Parse a single expression from text or from a token sequence.

    Returns None for empty input. When given text, tokens left over after the
    expression are a syntax error; a token sequence may carry trailing tokens.
    """
    stream = _stream(source)
    if stream.at_end():
        return None
    expr = stream.parse_expr()
    if isinstance(source, str) and not stream.at_end():
        extra = stream.peek()
        if extra.value == ")":
            raise LispSyntaxError(
                "Extra closing delimiter ')'", line=extra.line, column=extra.column
            )
        raise LispSyntaxError(
            f"Unexpected token {extra.value!r} after expression",
            line=extra.line,
            column=extra.column,
        )
    return expr


def parse_all(source: TokenSource) -> list[SExpression]:
    return list(_stream(source).parse_all())
