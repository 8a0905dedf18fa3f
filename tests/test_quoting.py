import pytest

from flispy.builtin.list_builtin import eval_builtin, head, join, list_builtin, tail
from flispy.types import Error, ErrorKind, Number, Qexpr, Sexpr, Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("{1 2 3}", "{1 2 3}"),
        ("{+ 1 (2 3)}", "{+ 1 (2 3)}"),
        ("{}", "{}"),
        ("(list 1 2 3 4)", "{1 2 3 4}"),
        ("(list (+ 1 2) {4})", "{3 {4}}"),
        ("(head {1 2 3 4})", "{1}"),
        ("(tail {1 2 3 4})", "{2 3 4}"),
        ("(tail {1})", "{}"),
        ("(head (tail {1 2 3}))", "{2}"),
        ("(join {1 2} {3 4})", "{1 2 3 4}"),
        ("(join {1} {2} {3})", "{1 2 3}"),
        ("(join {} {1} {})", "{1}"),
        ("(join {1 2})", "{1 2}"),
        ("(eval {+ 1 2})", "3"),
        ("(eval {head {5 6}})", "{5}"),
        ("(eval (head {(+ 1 2) (+ 10 20)}))", "3"),
        ("(eval (tail {tail tail {5 6 7}}))", "{6 7}"),
        ("(eval {})", "()"),
        ("(eval {{1 2}})", "{1 2}"),
        ("eval (list + 1 2 3)", "6"),
    ]
)
def test_list_builtins(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,kind,message",
    [
        ("(head {})", ErrorKind.EMPTY_LIST, "function 'head' passed {}"),
        ("(tail {})", ErrorKind.EMPTY_LIST, "function 'tail' passed {}"),
        ("(head 5)", ErrorKind.BAD_TYPE, "function 'head' passed incorrect type"),
        ("(tail (+ 1 2))", ErrorKind.BAD_TYPE, "function 'tail' passed incorrect type"),
        ("(head 1 2)", ErrorKind.BAD_ARITY, "function 'head' passed too many arguments"),
        ("(tail {1} {2})", ErrorKind.BAD_ARITY, "function 'tail' passed too many arguments"),
        ("(join {1} 2)", ErrorKind.BAD_TYPE, "function 'join' passed incorrect type"),
        ("(eval 1)", ErrorKind.BAD_TYPE, "function 'eval' passed incorrect type"),
        ("(eval {1} {2})", ErrorKind.BAD_ARITY, "function 'eval' passed too many arguments"),
    ]
)
def test_list_builtin_preconditions(interp, source, kind, message):
    assert interp.eval(source) == Error(kind, message)


def test_eval_propagates_inner_errors(interp):
    assert interp.eval("(eval {/ 1 0})") == Error(ErrorKind.DIVISION_BY_ZERO)
    assert interp.eval("(eval {foo 1})") == Error(ErrorKind.UNKNOWN_FUNCTION)


# Direct calls: builtins own and drain their argument lists

def test_list_reuses_the_argument_container(evaluate):
    args = Sexpr([Number(1), Number(2)])
    cells = args.cells
    result = list_builtin(args, evaluate)
    assert result == Qexpr([Number(1), Number(2)])
    assert result.cells is cells


def test_head_returns_the_original_qexpr(evaluate):
    q = Qexpr([Number(1), Number(2), Number(3)])
    result = head(Sexpr([q]), evaluate)
    assert result is q
    assert q.cells == [Number(1)]


def test_tail_keeps_order(evaluate):
    q = Qexpr([Number(1), Symbol("x"), Number(3)])
    assert tail(Sexpr([q]), evaluate) == Qexpr([Symbol("x"), Number(3)])


def test_join_moves_children(evaluate):
    inner = Qexpr([Number(9)])
    a, b = Qexpr([Number(1)]), Qexpr([inner, Number(2)])
    result = join(Sexpr([a, b]), evaluate)
    assert result is a
    assert result.cells[1] is inner
    assert len(b) == 0


def test_join_without_arguments(evaluate):
    assert join(Sexpr(), evaluate) == Qexpr()


@pytest.mark.parametrize("fn,name", [(head, "head"), (tail, "tail"), (eval_builtin, "eval")])
def test_no_arguments(evaluate, fn, name):
    assert fn(Sexpr(), evaluate) == Error(ErrorKind.BAD_ARITY, f"function '{name}' passed no arguments")


def test_eval_uses_the_given_evaluator():
    seen = []

    def fake_evaluate(value):
        seen.append(value)
        return Number(0)

    result = eval_builtin(Sexpr([Qexpr([Symbol("+"), Number(1)])]), fake_evaluate)
    assert result == Number(0)
    assert seen == [Sexpr([Symbol("+"), Number(1)])]
