"""Explicit-stack evaluator for Flispy.

Same contract as flispy.evaluation.evaluator.evaluate, but nested
s-expressions are walked with a stack of frames instead of Python recursion,
so evaluation depth is not bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

from functools import partial
from typing import Mapping, Optional

from flispy.builtin import BUILTINS, BuiltinFn
from flispy.evaluation.apply import apply_sexpr
from flispy.types.symbol import Symbol
from flispy.types.value import Error, Sexpr, Value


class _Frame:
    __slots__ = ("sexpr", "index")

    def __init__(self, sexpr: Sexpr):
        self.sexpr = sexpr
        self.index = 0  # next child to evaluate


def evaluate(value: Value, builtins: Optional[Mapping[Symbol, BuiltinFn]] = None) -> Value:
    if not isinstance(value, Sexpr):
        return value
    if builtins is None:
        builtins = BUILTINS
    evaluate_fn = partial(evaluate, builtins=builtins)

    stack = [_Frame(value)]
    while True:
        frame = stack[-1]
        cells = frame.sexpr.cells

        if frame.index < len(cells):
            child = cells[frame.index]
            if isinstance(child, Sexpr):
                stack.append(_Frame(child))
                continue
            if not isinstance(child, Error):
                frame.index += 1
                continue
            result: Value = child
        else:
            result = apply_sexpr(frame.sexpr, builtins, evaluate_fn)
        stack.pop()

        # Hand the finished value to the waiting parent. An Error finishes
        # every frame it reaches on the way up.
        while stack:
            parent = stack[-1]
            if isinstance(result, Error):
                stack.pop()
                continue
            parent.sexpr.cells[parent.index] = result
            parent.index += 1
            break
        else:
            return result
