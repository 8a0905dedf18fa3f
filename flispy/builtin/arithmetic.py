"""Arithmetic builtins: + - * / % ^.

Each operator folds its arguments left to right starting from the first one.
Division and remainder follow C integer semantics (truncate toward zero, the
remainder takes the sign of the dividend). Any accumulator that leaves the
signed 64-bit range becomes an overflow error.
"""
from __future__ import annotations

from typing import Callable, Union

from flispy import EvaluatorFn
from flispy.types.value import Error, ErrorKind, Number, Sexpr, Value, fits_int

BinaryOp = Callable[[int, int], Union[int, Error]]

# |x| >= 2 raised to this power is already past INT_MAX
_MAX_USEFUL_EXPONENT = 64


def _add(x: int, y: int) -> int:
    return x + y


def _sub(x: int, y: int) -> int:
    return x - y


def _mul(x: int, y: int) -> int:
    return x * y


def _trunc_div(x: int, y: int) -> int:
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def _div(x: int, y: int) -> int | Error:
    if y == 0:
        return Error(ErrorKind.DIVISION_BY_ZERO)
    return _trunc_div(x, y)


def _mod(x: int, y: int) -> int | Error:
    if y == 0:
        return Error(ErrorKind.DIVISION_BY_ZERO)
    return x - y * _trunc_div(x, y)


def _pow(x: int, y: int) -> int | Error:
    if y < 0:
        return Error(ErrorKind.NEGATIVE_EXPONENT)
    if abs(x) > 1 and y >= _MAX_USEFUL_EXPONENT:
        return Error(ErrorKind.INTEGER_OVERFLOW)
    return x ** y


OPERATORS: dict[str, BinaryOp] = {
    "+": _add,
    "-": _sub,
    "*": _mul,
    "/": _div,
    "%": _mod,
    "^": _pow,
}


def builtin_op(args: Sexpr, op: str) -> Value:
    """Fold `op` over the Number arguments in `args`."""
    if not args.cells:
        return Error(ErrorKind.BAD_ARITY, f"function '{op}' passed no arguments")
    if not all(isinstance(cell, Number) for cell in args):
        return Error(ErrorKind.NON_NUMBER)

    binary = OPERATORS[op]
    acc = args.pop(0).value

    # A lone argument to '-' is negated
    if op == "-" and not args.cells:
        acc = -acc

    while args.cells:
        result = binary(acc, args.pop(0).value)
        if isinstance(result, Error):
            return result
        if not fits_int(result):
            return Error(ErrorKind.INTEGER_OVERFLOW)
        acc = result

    if not fits_int(acc):
        return Error(ErrorKind.INTEGER_OVERFLOW)
    return Number(acc)


def _make_builtin(op: str):
    def builtin(args: Sexpr, evaluate_fn: EvaluatorFn) -> Value:
        return builtin_op(args, op)
    builtin.__name__ = f"builtin_{OPERATORS[op].__name__.lstrip('_')}"
    return builtin


add = _make_builtin("+")
sub = _make_builtin("-")
mul = _make_builtin("*")
div = _make_builtin("/")
mod = _make_builtin("%")
power = _make_builtin("^")
