"""Registry of builtin functions.

Maps Symbols to functions over an already-evaluated argument list. The
evaluators consult this table when an s-expression starts with a symbol;
adding a builtin means adding an entry here.
"""

from typing import Callable

from flispy import EvaluatorFn
from flispy.types.symbol import Symbol
from flispy.types.value import Sexpr, Value
from flispy.builtin.arithmetic import add, sub, mul, div, mod, power
from flispy.builtin.list_builtin import list_builtin, head, tail, join, eval_builtin

BuiltinFn = Callable[[Sexpr, EvaluatorFn], Value]

BUILTINS: dict[Symbol, BuiltinFn] = {
    Symbol("+"): add,
    Symbol("-"): sub,
    Symbol("*"): mul,
    Symbol("/"): div,
    Symbol("%"): mod,
    Symbol("^"): power,
    Symbol("list"): list_builtin,
    Symbol("head"): head,
    Symbol("tail"): tail,
    Symbol("join"): join,
    Symbol("eval"): eval_builtin,
}
