"""Line-oriented front end: REPL and file runner.

Input is fed to the interpreter in chunks: lines are accumulated until their
parentheses balance, then the whole chunk is evaluated. An error in one chunk
is reported and the next chunk still runs.
"""

from __future__ import annotations

import cmd
import logging
from typing import Iterable, Iterator, TextIO

from minilisp.errors import LispError
from minilisp.interpreter import Interpreter
from minilisp.printer import format_value
from minilisp.reader.tokenizer import lex

logger = logging.getLogger(__name__)


def paren_balance(text: str) -> int:
    """Open minus close parentheses, counted over tokens."""
    depth = 0
    for tok in lex(text):
        if tok.value == "(":
            depth += 1
        elif tok.value == ")":
            depth -= 1
    return depth


def read_chunks(lines: Iterable[str]) -> Iterator[str]:
    """Yield balanced-parenthesis chunks of input; blank lines are skipped.

    A chunk ends as soon as its parentheses balance (or over-close, which the
    parser then reports). A trailing unbalanced chunk is yielded as is so that
    the parser reports the missing delimiter.
    """
    pending: list[str] = []
    for line in lines:
        if not pending and not line.strip():
            continue
        pending.append(line)
        chunk = "".join(pending)
        if paren_balance(chunk) <= 0:
            pending.clear()
            if chunk.strip():
                yield chunk
    if pending and "".join(pending).strip():
        yield "".join(pending)


def run_source(interp: Interpreter, text: str, out: TextIO, err: TextIO) -> int:
    """Evaluate every chunk of `text`, printing results; returns the error count."""
    failures = 0
    for chunk in read_chunks(text.splitlines(keepends=True)):
        try:
            results = interp.evaluate_all(chunk)
        except LispError as ex:
            failures += 1
            logger.debug("chunk failed: %r", chunk)
            print(f"Error: {ex}", file=err)
            continue
        for result in results:
            print(format_value(result), file=out)
    return failures


class LispShell(cmd.Cmd):
    """minilisp interactive shell."""
    intro = "minilisp interpreter\nType 'exit' or 'quit' to leave."
    prompt = "lisp> "
    secondary_prompt = "... "  # used while parentheses are unbalanced
    _primary_prompt = "lisp> "

    def __init__(self, interp: Interpreter | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interp = interp if interp is not None else Interpreter()
        self._pending = ""

    def default(self, line):
        """Accumulates input and evaluates it once parentheses balance."""
        text = self._pending + line + "\n"
        if paren_balance(text) > 0:
            self._pending = text
            self.prompt = self.secondary_prompt
            return False

        self._pending = ""
        self.prompt = self._primary_prompt
        try:
            results = self.interp.evaluate_all(text)
        except LispError as ex:
            print(f"Error: {ex}", file=self.stdout)
            return False
        for result in results:
            print(f"=> {format_value(result)}", file=self.stdout)
        return False

    def onecmd(self, line):
        # Lisp text is never a shell command, except for the exit words
        stripped = line.strip()
        if not self._pending and stripped in ("exit", "quit"):
            return True
        if stripped == "EOF":
            return self.do_EOF("")
        if not stripped and not self._pending:
            return self.emptyline()
        return self.default(line)

    def emptyline(self):
        """Do not repeat the previous command on an empty line."""
        return False

    def do_EOF(self, arg):
        """Exits the interpreter."""
        print(file=self.stdout)
        return True
