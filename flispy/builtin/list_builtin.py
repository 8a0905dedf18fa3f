"""List builtins: list, head, tail, join, eval.

Every builtin owns the argument list it is given. Children are moved between
lists, never copied.
"""
from __future__ import annotations

from typing import Optional

from flispy import EvaluatorFn
from flispy.types.value import Error, ErrorKind, Qexpr, Sexpr, Value


def _single_qexpr(args: Sexpr, name: str, allow_empty: bool = True) -> Optional[Error]:
    """Check that `args` holds exactly one (optionally non-empty) Qexpr."""
    if len(args) == 0:
        return Error(ErrorKind.BAD_ARITY, f"function '{name}' passed no arguments")
    if len(args) > 1:
        return Error(ErrorKind.BAD_ARITY, f"function '{name}' passed too many arguments")
    if not isinstance(args.cells[0], Qexpr):
        return Error(ErrorKind.BAD_TYPE, f"function '{name}' passed incorrect type")
    if not allow_empty and len(args.cells[0]) == 0:
        return Error(ErrorKind.EMPTY_LIST, f"function '{name}' passed {{}}")
    return None


def list_builtin(args: Sexpr, evaluate_fn: EvaluatorFn) -> Value:
    """Return the arguments themselves as a q-expression."""
    return Qexpr.from_sexpr(args)


def head(args: Sexpr, evaluate_fn: EvaluatorFn) -> Value:
    """(head {a b c}) => {a}"""
    err = _single_qexpr(args, "head", allow_empty=False)
    if err is not None:
        return err
    q = args.take(0)
    del q.cells[1:]
    return q


def tail(args: Sexpr, evaluate_fn: EvaluatorFn) -> Value:
    """(tail {a b c}) => {b c}"""
    err = _single_qexpr(args, "tail", allow_empty=False)
    if err is not None:
        return err
    q = args.take(0)
    q.pop(0)
    return q


def join(args: Sexpr, evaluate_fn: EvaluatorFn) -> Value:
    """Concatenate q-expressions in argument order."""
    for cell in args:
        if not isinstance(cell, Qexpr):
            return Error(ErrorKind.BAD_TYPE, "function 'join' passed incorrect type")
    if not args.cells:
        return Qexpr()

    result = args.pop(0)
    while args.cells:
        result.cells.extend(args.pop(0).release())
    return result


def eval_builtin(args: Sexpr, evaluate_fn: EvaluatorFn) -> Value:
    """(eval {+ 1 2}) => 3"""
    err = _single_qexpr(args, "eval")
    if err is not None:
        return err
    return evaluate_fn(Sexpr.from_qexpr(args.take(0)))
