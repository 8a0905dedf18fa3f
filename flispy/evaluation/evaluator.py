"""Core recursive evaluator for Flispy.

Reduces a value tree to its final value. Only s-expressions do work: their
children are evaluated left to right, the first Error short-circuits the
whole expression, and the rest is handed to apply_sexpr.
"""

from __future__ import annotations

from functools import partial
from typing import Mapping, Optional

from flispy.builtin import BUILTINS, BuiltinFn
from flispy.evaluation.apply import apply_sexpr
from flispy.types.symbol import Symbol
from flispy.types.value import Error, Sexpr, Value


def evaluate(value: Value, builtins: Optional[Mapping[Symbol, BuiltinFn]] = None) -> Value:
    if not isinstance(value, Sexpr):
        return value  # Numbers, Errors, Symbols and Qexprs are already final
    if builtins is None:
        builtins = BUILTINS
    return evaluate_sexpr(value, builtins)


def evaluate_sexpr(sexpr: Sexpr, builtins: Mapping[Symbol, BuiltinFn]) -> Value:
    cells = sexpr.cells
    for i in range(len(cells)):
        result = evaluate(cells[i], builtins)
        if isinstance(result, Error):
            return result
        cells[i] = result
    return apply_sexpr(sexpr, builtins, partial(evaluate, builtins=builtins))
