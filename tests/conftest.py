import pytest

from monkey.evaluation.evaluator import evaluate
from monkey.interpreter import Interpreter
from monkey.reader.parser import parse
from monkey.types.environment import Environment


@pytest.fixture
def env():
    """Return a fresh top-level environment for each test."""
    return Environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Parse and evaluate source against the test's environment (no macro pass)."""
    def _run(source: str):
        program = parse(source).raise_for_errors()
        return evaluate(program, env)
    return _run


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    # keep diagnostics free of ANSI escapes in assertions
    monkeypatch.setenv("MONKEY_NO_COLOR", "1")
