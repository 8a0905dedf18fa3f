import pytest

# This test configuration runs every test twice:
# 1) with the tree-recursive evaluator ["recursive"]
# 2) with the explicit-stack evaluator ["iterative"]
# Most tests instantiate Interpreter() directly. An autouse fixture switches
# the default engine for each run without changing individual test files.

from flispy.evaluation import get_evaluator
from flispy.interpreter import Interpreter


@pytest.fixture(params=["recursive", "iterative"])
def engine(request):
    return request.param


@pytest.fixture(autouse=True)
def _force_interpreter_engine(engine, monkeypatch):
    monkeypatch.delenv("FLISPY_ENGINE", raising=False)
    monkeypatch.setattr(Interpreter, "DefaultEngine", engine)


@pytest.fixture
def evaluate(engine):
    """The evaluator function for the current engine."""
    return get_evaluator(engine)


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate a line of source and return the printed result."""
    return interp.eval_to_text
