import pytest

from minilisp.errors import LispArityError, LispTypeError, LispUnboundVariable
from minilisp.evaluation.evaluator import evaluate, operator_name
from minilisp.reader.parser import parse
from minilisp.types.symbol import NIL, T, Symbol

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate([], env) == []


def test_symbol_lookup(env):
    env.set_variable(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42


def test_unbound_symbol_is_a_literal(env):
    assert evaluate(Symbol("z"), env) == Symbol("z")
    with pytest.raises(LispUnboundVariable):
        env.get_variable(Symbol("z"))


def test_t_and_nil_evaluate_to_themselves(env):
    assert evaluate(T, env) == T
    assert evaluate(NIL, env) == NIL


def test_simple_expression(env):
    expr = [Symbol("+"), 1, 2]
    assert evaluate(expr, env) == 3


def test_arguments_are_evaluated(env):
    env.set_variable(Symbol("a"), 4)
    assert evaluate(parse("(* a (+ a 1))"), env) == 20


def test_python_bool_is_not_a_value(env):
    with pytest.raises(LispTypeError):
        evaluate(True, env)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2)", T),
        ("(< 2 1)", NIL),
        ("(> 2 1)", T),
        ("(> 1 1)", NIL),
        ("(< 1 1.5)", T),
        ("(equal 2 2)", T),
        ("(equal 2 3)", NIL),
        ("(equal 'a 'a)", T),
        ("(equal '(1 (2 b)) '(1 (2 b)))", T),
        ("(equal '(1 2) '(1 2 3))", NIL),
        ("(equal 1 1.0)", NIL),
        ("(equal () ())", T),
        ("(atom 5)", T),
        ("(atom 'x)", T),
        ("(atom ())", T),
        ("(atom (quote (1 2)))", NIL),
        ("(list)", []),
        ("(list 1 (+ 1 1) 'c)", [1, 2, Symbol("c")]),
    ]
)
def test_builtin_operators(env, source, expected):
    assert evaluate(parse(source), env) == expected


@pytest.mark.parametrize(
    "source,name,expected,actual",
    [
        ("(equal 1)", "equal", 2, 1),
        ("(< 1 2 3)", "<", 2, 3),
        ("(> 1)", ">", 2, 1),
        ("(atom)", "atom", 1, 0),
        ("(atom 1 2)", "atom", 1, 2),
    ]
)
def test_builtin_arity(env, source, name, expected, actual):
    with pytest.raises(LispArityError) as info:
        evaluate(parse(source), env)
    assert (info.value.name, info.value.expected, info.value.actual) == (name, expected, actual)
    assert f"expects {expected}" in str(info.value)


@pytest.mark.parametrize("source", ["(< 1 'a)", "(> '(1) 0)"])
def test_comparison_requires_numbers(env, source):
    with pytest.raises(LispTypeError):
        evaluate(parse(source), env)


def test_list_builds_a_new_list(env):
    quoted = parse("'(1 2)")
    original = evaluate(quoted, env)
    built = evaluate([Symbol("list"), 1, 2], env)
    assert built == original
    assert built is not original


def test_operator_name():
    assert operator_name(Symbol("+")) == Symbol("+")
    assert operator_name(3) == Symbol("3")
    assert operator_name([Symbol("a")]) == Symbol("(a)")


def test_error_records_innermost_form(env):
    from minilisp.errors import LispDivisionByZero
    with pytest.raises(LispDivisionByZero) as info:
        evaluate(parse("(+ 1 (* 2 (/ 1 0)))"), env)
    assert info.value.form == [Symbol("/"), 1, 0]


def test_symbols_compare_by_name_only():
    assert Symbol("a") == Symbol("".join(["a"]))
    assert hash(Symbol("a")) == hash(Symbol("a"))
    assert Symbol("a") != Symbol("A")
    assert Symbol("1") != 1
    assert Symbol("a") != "a"
    assert str(Symbol("a")) == "a"
