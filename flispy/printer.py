"""Render Flispy values as text."""

from __future__ import annotations

from flispy.types.symbol import Symbol
from flispy.types.value import Error, ListValue, Number, Qexpr, Sexpr, Value

ERROR_PREFIX = "Error: "


def render_list(value: ListValue, open_: str, close: str) -> list:
    """Pieces of a list in print order: brackets, cells and separators."""
    pieces: list = [open_]
    for i, cell in enumerate(value):
        if i:
            pieces.append(" ")
        pieces.append(cell)
    pieces.append(close)
    return pieces


def render(value: Value) -> str:
    if isinstance(value, str):
        raise TypeError(f"Cannot render {value!r}")
    out: list[str] = []
    # Pending pieces in reverse order; str pieces are literal text
    stack: list = [value]
    while stack:
        item = stack.pop()
        match item:
            case str():
                out.append(item)
            case Number():
                out.append(str(item.value))
            case Error():
                out.append(ERROR_PREFIX + item.message)
            case Symbol():
                out.append(item.name)
            case Sexpr():
                stack.extend(reversed(render_list(item, "(", ")")))
            case Qexpr():
                stack.extend(reversed(render_list(item, "{", "}")))
            case _:
                raise TypeError(f"Cannot render {item!r}")
    return "".join(out)
