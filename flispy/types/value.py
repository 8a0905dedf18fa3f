"""Runtime values for Flispy.

Every value is one of five variants: Number, Error, Symbol (see symbol.py),
Sexpr and Qexpr. The two list variants own their children exclusively; a
child is moved between lists with pop/add and never shared, so every value
tree stays a tree.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Optional, Union

from flispy.errors import FlispyIndexError, FlispyTypeError
from flispy.types.symbol import Symbol

# Range of the signed 64-bit integers Flispy numbers live in
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def fits_int(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


class ErrorKind(Enum):
    INVALID_NUMBER = "invalid number"
    NON_NUMBER = "cannot operate on a non-number"
    DIVISION_BY_ZERO = "division by zero"
    INTEGER_OVERFLOW = "integer overflow"
    NEGATIVE_EXPONENT = "negative exponent"
    BAD_ARITY = "wrong number of arguments"
    BAD_TYPE = "incorrect type"
    EMPTY_LIST = "empty list"
    UNKNOWN_FUNCTION = "unknown function"
    NOT_A_SYMBOL = "expression does not start with a symbol"


class Number:
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value!r})"


class Error:
    """A terminal evaluation result. Errors never hold children."""

    __slots__ = ("kind", "message")

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = kind.value if message is None else message

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Error)
            and self.kind is other.kind
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self):
        return f"Error({self.kind.name}, {self.message!r})"


class ListValue:
    """Ordered, exclusively owned sequence of child values."""

    __slots__ = ("cells",)

    def __init__(self, cells: Iterable[Value] | None = None):
        self.cells: list[Value] = list(cells) if cells is not None else []

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def add(self, value: Value) -> ListValue:
        """Append `value`, taking ownership of it, and return this list."""
        self.cells.append(value)
        return self

    def pop(self, index: int) -> Value:
        """Detach and return the child at `index`; later children shift left."""
        if not 0 <= index < len(self.cells):
            raise FlispyIndexError(
                f"Cannot pop index {index} from a list of {len(self.cells)}"
            )
        return self.cells.pop(index)

    def take(self, index: int) -> Value:
        """Pop the child at `index` and release the rest of this list."""
        value = self.pop(index)
        self.cells.clear()
        return value

    def release(self) -> list[Value]:
        """Hand out the child sequence, leaving this list empty."""
        cells, self.cells = self.cells, []
        return cells

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.cells!r})"


class Sexpr(ListValue):
    """Evaluable list: applies its first element to the rest."""

    __slots__ = ()

    @classmethod
    def from_qexpr(cls, qexpr: Qexpr) -> Sexpr:
        if not isinstance(qexpr, Qexpr):
            raise FlispyTypeError(f"Cannot convert {qexpr!r} to an s-expression")
        sexpr = cls()
        sexpr.cells = qexpr.release()
        return sexpr


class Qexpr(ListValue):
    """Literal list: never evaluated on its own."""

    __slots__ = ()

    @classmethod
    def from_sexpr(cls, sexpr: Sexpr) -> Qexpr:
        if not isinstance(sexpr, Sexpr):
            raise FlispyTypeError(f"Cannot convert {sexpr!r} to a q-expression")
        qexpr = cls()
        qexpr.cells = sexpr.release()
        return qexpr


Value = Union[Number, Error, Symbol, Sexpr, Qexpr]
