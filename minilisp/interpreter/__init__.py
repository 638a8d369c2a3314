from __future__ import annotations
import logging
import threading
from typing import Callable, Optional

from minilisp import LispValue
from minilisp.config import ensure_recursion_limit, get_max_depth
from minilisp.errors import LispRecursionError
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import parse, parse_all
from minilisp.runtime_context import set_max_depth
from minilisp.types.environment import Environment
from minilisp.types.symbol import NIL, T

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates minilisp code against one global Environment that
    persists across calls, so setq/defun effects carry over like a session.
    Evaluation on one instance is serialized by a re-entrant lock.

    `max_depth` bounds nested user-function calls; it defaults to
    MINILISP_MAX_DEPTH as set when the interpreter is created.
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth: int = get_max_depth() if max_depth is None else max_depth
        ensure_recursion_limit(self.max_depth)
        self.env: Environment = Environment()
        self.env.set_variable(T, T)
        self.env.set_variable(NIL, NIL)
        self._lock = threading.RLock()

    def _read(self, reader: Callable, code: str):
        try:
            return reader(code)
        except RecursionError as ex:
            raise LispRecursionError("Input is nested too deeply to read") from ex

    def _run(self, expr) -> LispValue:
        previous = set_max_depth(self.max_depth)
        try:
            return evaluate(expr, self.env)
        except RecursionError as ex:
            raise LispRecursionError("Host stack exhausted during evaluation") from ex
        finally:
            set_max_depth(previous)

    def evaluate(self, code: str) -> Optional[LispValue]:
        """Evaluate exactly one expression; blank input gives None."""
        with self._lock:
            expr = self._read(parse, code)
            if expr is None:
                return None
            logger.debug("evaluate %s", code.strip())
            return self._run(expr)

    def evaluate_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level expression in `code`, in order."""
        with self._lock:
            return [self._run(expr) for expr in self._read(parse_all, code)]
