from flispy.types.symbol import Symbol
from flispy.types.value import (
    INT_MAX,
    INT_MIN,
    Error,
    ErrorKind,
    ListValue,
    Number,
    Qexpr,
    Sexpr,
    Value,
    fits_int,
)

__all__ = [
    "INT_MAX",
    "INT_MIN",
    "Error",
    "ErrorKind",
    "ListValue",
    "Number",
    "Qexpr",
    "Sexpr",
    "Symbol",
    "Value",
    "fits_int",
]
