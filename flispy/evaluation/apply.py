"""Application step shared by both evaluators.

Called once every child of an s-expression has been evaluated and none of
them is an Error:

- an empty s-expression is its own value;
- a single child is returned without its list wrapper, so (5) => 5;
- otherwise the first child must be a Symbol naming a builtin, which is
  applied to the remaining children.
"""

from __future__ import annotations

from typing import Mapping

from flispy import EvaluatorFn
from flispy.builtin import BuiltinFn
from flispy.types.symbol import Symbol
from flispy.types.value import Error, ErrorKind, Sexpr, Value
from flispy.logging_config import get_logger

logger = get_logger(__name__)


def apply_sexpr(
    sexpr: Sexpr,
    builtins: Mapping[Symbol, BuiltinFn],
    evaluate_fn: EvaluatorFn,
) -> Value:
    if len(sexpr) == 0:
        return sexpr
    if len(sexpr) == 1:
        return sexpr.take(0)

    f = sexpr.pop(0)
    if not isinstance(f, Symbol):
        return Error(ErrorKind.NOT_A_SYMBOL)

    builtin = builtins.get(f)
    if builtin is None:
        logger.debug("Unknown function %s", f)
        return Error(ErrorKind.UNKNOWN_FUNCTION)
    return builtin(sexpr, evaluate_fn)

