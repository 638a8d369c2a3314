import pytest

from minilisp.types.symbol import NIL, T, Symbol

programs = [
    ("(setq x 10)", 10),
    ("(setq y 20)", 20),
    ("(+ x y)", 30),
    ("(* x y)", 200),
    ("(defun max2 (a b) (cond ((> a b) a) (t b)))", Symbol("max2")),
    ("(max2 x y)", 20),
    ("(max2 7 3)", 7),
    ("(quote (a b c))", [Symbol('a'), Symbol('b'), Symbol('c')]),
    ("(list x y (+ x y))", [10, 20, 30]),
    ("(atom (list 1 2))", NIL),
    ("(atom x)", T),
    ("(equal (list 1 2) '(1 2))", T),
    ("()", []),
    ("nil", NIL),
    ("t", T),
    ("undefined-symbol", Symbol("undefined-symbol")),
    ("", None),
]


def test_session_programs(interp):
    for source, expected in programs:
        assert interp.evaluate(source) == expected, source


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 2 (* 3 8))", 26),
        ("(atom (quote (1 2)))", NIL),
        ("(atom 5)", T),
        ("  (+ 1\n     2)  ", 3),
        ("'()", []),
    ]
)
def test_single_expressions(interp, source, expected):
    assert interp.evaluate(source) == expected
