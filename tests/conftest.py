import pytest

from minilisp.interpreter import Interpreter
from minilisp.types.environment import Environment
from minilisp.types.symbol import NIL, T

# Most tests go through a fresh Interpreter (one global environment per test).
# Evaluator-level tests use the bare `env` fixture, which carries the same
# t / nil bindings the interpreter installs.


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def env():
    e = Environment()
    e.set_variable(T, T)
    e.set_variable(NIL, NIL)
    return e


@pytest.fixture
def run(interp):
    """Evaluate a sequence of sources in one session and return the last result."""
    def _run(*sources):
        result = None
        for source in sources:
            result = interp.evaluate(source)
        return result
    return _run
