"""Syntax tree -> Value reader.

Turns the labelled tree produced by flispy.reader.parser into a Value tree in
a single stateless pass. Nodes are matched by tag substring, the same way for
rule trees and bare tokens, so hand-built trees read identically.
"""

from __future__ import annotations

import re

from lark import Token, Tree

from flispy.errors import FlispySyntaxError
from flispy.reader.parser import ROOT_TAG
from flispy.types.symbol import Symbol
from flispy.types.value import (
    Error,
    ErrorKind,
    ListValue,
    Number,
    Qexpr,
    Sexpr,
    Value,
    fits_int,
)

SyntaxNode = Tree | Token

BRACKETS = frozenset({"(", ")", "{", "}"})
INTEGER_RE = re.compile(r"-?[0-9]+")


def node_tag(node: SyntaxNode) -> str:
    return str(node.data) if isinstance(node, Tree) else node.type


def node_contents(node: SyntaxNode) -> str:
    """Literal text of a node: a token's value, or its tokens concatenated."""
    if isinstance(node, Token):
        return str(node)
    return "".join(node_contents(child) for child in node.children)


def node_children(node: SyntaxNode) -> list[SyntaxNode]:
    return list(node.children) if isinstance(node, Tree) else []


def is_scaffolding(node: SyntaxNode) -> bool:
    """Bracket tokens and anonymous regex matches carry no value."""
    if not isinstance(node, Token):
        return False
    return str(node) in BRACKETS or node.type.startswith("__ANON")


def read_number(node: SyntaxNode) -> Value:
    text = node_contents(node)
    if not INTEGER_RE.fullmatch(text):
        return Error(ErrorKind.INVALID_NUMBER)
    n = int(text, 10)
    return Number(n) if fits_int(n) else Error(ErrorKind.INVALID_NUMBER)


def read_node(node: SyntaxNode) -> Value:
    """Read one node on its own: a leaf value, or an empty list of the node's kind."""
    tag = node_tag(node)
    if "number" in tag:
        return read_number(node)
    if "symbol" in tag:
        return Symbol(node_contents(node))
    if tag == ROOT_TAG or "sexpr" in tag:
        return Sexpr()
    if "qexpr" in tag:
        return Qexpr()
    raise FlispySyntaxError(f"Cannot read syntax node tagged {tag!r}")


def read(node: SyntaxNode) -> Value:
    root = read_node(node)
    if not isinstance(root, ListValue):
        return root

    # Lists are filled from a stack of pending child iterators, so nesting
    # depth is not bounded by the recursion limit.
    stack = [(root, iter(node_children(node)))]
    while stack:
        x, children = stack[-1]
        for child in children:
            if is_scaffolding(child):
                continue
            value = read_node(child)
            x.add(value)
            if isinstance(value, ListValue):
                stack.append((value, iter(node_children(child))))
                break
        else:
            stack.pop()
    return root
