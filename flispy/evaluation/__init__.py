"""Evaluation engines.

`recursive` is the tree-recursive evaluator; `iterative` walks the same tree
with an explicit stack. Both share the application step in apply.py and are
observably identical.
"""

from flispy import EvaluatorFn
from flispy.errors import FlispyConfigError
from flispy.evaluation import evaluator, evaluator_alt

ENGINES: dict[str, EvaluatorFn] = {
    "recursive": evaluator.evaluate,
    "iterative": evaluator_alt.evaluate,
}


def get_evaluator(name: str) -> EvaluatorFn:
    try:
        return ENGINES[name]
    except KeyError:
        raise FlispyConfigError(
            f"Unknown engine {name!r}; expected one of {', '.join(ENGINES)}"
        ) from None
