"""
  Flispy grammar and parser

The grammar is compiled by lark into a generic labelled tree:

    - Tree.data    -> the rule tag ("program", "number", "symbol", "sexpr", "qexpr")
    - Token.type   -> the terminal tag ("INTEGER", "SYMBOL", "LPAR", "LBRACE", ...)
    - Token value  -> the literal text
    - children     -> ordered sub-nodes of the same shape

All tokens are kept, brackets included, so the reader sees the tree exactly
as the grammar matched it and decides itself which nodes carry meaning.
"""

from __future__ import annotations

from lark import Lark, Tree
from lark.exceptions import UnexpectedInput

from flispy.errors import FlispySyntaxError
from flispy.logging_config import get_logger

logger = get_logger(__name__)

ROOT_TAG = "program"

GRAMMAR = r"""
    program: _expr*

    _expr: number
         | symbol
         | sexpr
         | qexpr

    number: INTEGER
    symbol: SYMBOL
    sexpr: "(" _expr* ")"
    qexpr: "{" _expr* "}"

    INTEGER.2: /-?[0-9]+/
    SYMBOL: /[a-zA-Z_+\-*\/\\=<>!&%^]+/

    %import common.WS
    %ignore WS
"""

_parser = Lark(GRAMMAR, start=ROOT_TAG, parser="lalr", keep_all_tokens=True)


def parse(source: str, filename: str = "<stdin>") -> Tree:
    """Parse one line of Flispy source into a syntax tree rooted at `program`."""
    try:
        tree = _parser.parse(source)
    except UnexpectedInput as e:
        located = isinstance(e.line, int) and e.line > 0
        if located:
            where = f"{filename}:{e.line}:{e.column}"
        else:
            where = f"{filename}: end of input"
        message = f"{where}: error: unexpected input"
        context = e.get_context(source).rstrip() if located and e.pos_in_stream is not None else ""
        logger.debug("Parse failed: %s", e)
        raise FlispySyntaxError(f"{message}\n{context}" if context else message) from e
    logger.debug("Parsed %r", source)
    return tree
