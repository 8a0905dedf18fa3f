import pytest
from lark import Token, Tree

from flispy.errors import FlispySyntaxError
from flispy.printer import render
from flispy.reader import parse, read, read_number
from flispy.types import INT_MAX, INT_MIN, Error, ErrorKind, Number, Qexpr, Sexpr, Symbol


def _tokens(tree):
    return [(t.type, str(t)) for t in tree.scan_values(lambda v: isinstance(v, Token))]


def test_parse_keeps_brackets():
    tree = parse("(+ 1 {2})")
    assert tree.data == "program"
    assert _tokens(tree) == [
        ("LPAR", "("),
        ("SYMBOL", "+"),
        ("INTEGER", "1"),
        ("LBRACE", "{"),
        ("INTEGER", "2"),
        ("RBRACE", "}"),
        ("RPAR", ")"),
    ]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("-5", [("INTEGER", "-5")]),
        ("- 5", [("SYMBOL", "-"), ("INTEGER", "5")]),
        ("+5", [("SYMBOL", "+"), ("INTEGER", "5")]),
        ("head tail", [("SYMBOL", "head"), ("SYMBOL", "tail")]),
        ("foo", [("SYMBOL", "foo")]),
    ]
)
def test_lexing(source, expected):
    assert _tokens(parse(source)) == expected


@pytest.mark.parametrize("source", ["(+ 1 2", "{1 2", ")", "(1 2))", "1.5", "\"str\""])
def test_parse_errors(source):
    with pytest.raises(FlispySyntaxError) as exc:
        parse(source)
    assert "error: unexpected input" in str(exc.value)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("", Sexpr()),
        ("5", Sexpr([Number(5)])),
        ("-45", Sexpr([Number(-45)])),
        ("+ 1 2", Sexpr([Symbol("+"), Number(1), Number(2)])),
        ("(+ 1 2)", Sexpr([Sexpr([Symbol("+"), Number(1), Number(2)])])),
        ("{1 (2) {}}", Sexpr([Qexpr([Number(1), Sexpr([Number(2)]), Qexpr()])])),
        ("() {}", Sexpr([Sexpr(), Qexpr()])),
    ]
)
def test_read(source, expected):
    assert read(parse(source)) == expected


@pytest.mark.parametrize("text", ["0", "42", "-17", str(INT_MAX), str(INT_MIN), "head", "+", "%"])
def test_leaf_round_trip(text):
    (leaf,) = parse(text).children
    assert render(read(leaf)) == text


@pytest.mark.parametrize("text", [str(INT_MAX + 1), str(INT_MIN - 1), "1" * 40])
def test_out_of_range_number(text):
    assert read(parse(text)) == Sexpr([Error(ErrorKind.INVALID_NUMBER)])


@pytest.mark.parametrize("text", ["", "1_000", " 7", "+3", "0x10"])
def test_read_number_rejects_malformed_text(text):
    node = Tree("number", [Token("INTEGER", text)])
    assert read_number(node) == Error(ErrorKind.INVALID_NUMBER)


def test_read_hand_built_tree():
    tree = Tree("program", [
        Token("__ANON_0", ""),
        Tree("qexpr", [
            Token("LBRACE", "{"),
            Tree("symbol", [Token("SYMBOL", "head")]),
            Tree("number", [Token("INTEGER", "3")]),
            Token("RBRACE", "}"),
        ]),
        Token("__ANON_1", ""),
    ])
    assert read(tree) == Sexpr([Qexpr([Symbol("head"), Number(3)])])


def test_read_unknown_tag():
    with pytest.raises(FlispySyntaxError):
        read(Tree("string", [Token("STRING", "\"x\"")]))


def test_read_very_deep_nesting():
    depth = 3000
    value = read(parse("(" * depth + "1 {" * depth + "}" * depth + ")" * depth))
    for _ in range(depth):
        (value,) = value.cells
        assert type(value) is Sexpr
    for _ in range(depth):
        number, value = value.cells
        assert number == Number(1)
        assert type(value) is Qexpr
    assert value.cells == []
