import pytest

from sprig.errors import SprigArityError, SprigTypeError, SprigUnboundVariable
from sprig.evaluation.evaluator import evaluate
from sprig.reader.parser import Reader
from sprig.types.expression import render
from sprig.types.number import Number
from sprig.types.procedure import Closure
from sprig.types.symbol import Symbol


def run(source, env):
    result = None
    for expr in Reader(source).read_all():
        result = evaluate(expr, env)
    return result


# -----------------------------------------------------
# lambda
# -----------------------------------------------------

def test_lambda_creates_closure_over_current_env(env):
    closure = run("(lambda (x y) (* x y))", env)
    assert isinstance(closure, Closure)
    assert closure.params == ["x", "y"]
    assert closure.env is env
    assert render(closure) == "(lambda (x y) (* x y))"


def test_lambda_does_not_evaluate_body(env):
    closure = run("(lambda () (/ 1 0))", env)
    assert isinstance(closure, Closure)
    assert closure.params == []


def test_lambda_keeps_first_body_expression(env):
    assert run("((lambda (x) (+ x 1) (/ x 0)) 1)", env) == Number(2)


@pytest.mark.parametrize("source", ["(lambda)", "(lambda (x))"])
def test_lambda_arity(env, source):
    with pytest.raises(SprigArityError):
        run(source, env)


@pytest.mark.parametrize("source", ["(lambda x x)", "(lambda (1) 1)", "(lambda ((x)) x)"])
def test_lambda_parameters_must_be_symbols(env, source):
    with pytest.raises(SprigTypeError):
        run(source, env)


# -----------------------------------------------------
# define
# -----------------------------------------------------

def test_define_variable_returns_value(env):
    assert run("(define y (+ 1 2))", env) == Number(3)
    assert env.lookup("y") == Number(3)


def test_define_function(env):
    square = run("(define (square x) (* x x))", env)
    assert isinstance(square, Closure)
    assert render(square) == "(lambda (x) (* x x))"
    assert run("(square 5)", env) == Number(25)


def test_define_function_without_parameters(env):
    run("(define (seven) 7)", env)
    assert run("(seven)", env) == Number(7)


def test_define_rebinds(env):
    run("(define a 1)", env)
    run("(define a 2)", env)
    assert env.lookup("a") == Number(2)


def test_define_inside_function_binds_globally(env):
    run("(define (f x) (define inner x))", env)
    run("(f 7)", env)
    assert env.lookup("inner") == Number(7)
    assert "inner" in env.vars


@pytest.mark.parametrize("source", ["(define)", "(define x)"])
def test_define_arity(env, source):
    with pytest.raises(SprigArityError):
        run(source, env)


@pytest.mark.parametrize("source", ["(define 5 1)", "(define (5 x) 1)", "(define () 1)"])
def test_define_requires_a_name(env, source):
    with pytest.raises(SprigTypeError):
        run(source, env)


# -----------------------------------------------------
# if / not
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", Number(1)),
        ("(if #f 1 2)", Number(2)),
        ("(if 0 1 2)", Number(1)),
        ("(if () 1 2)", Number(1)),
        ("(if (< 1 2) 10 20)", Number(10)),
        ("(if #f 1)", Symbol("#f")),
    ]
)
def test_if(env, source, expected):
    assert run(source, env) == expected


def test_if_never_evaluates_other_branch(env):
    assert run("(if #t 1 (/ 1 0))", env) == Number(1)
    assert run("(if #f (/ 1 0) 2)", env) == Number(2)
    run("(if #t 1 (define touched 1))", env)
    with pytest.raises(SprigUnboundVariable):
        env.lookup("touched")


def test_if_arity(env):
    with pytest.raises(SprigArityError):
        run("(if #t)", env)


def test_special_form_receives_operands_unevaluated(env):
    # `x` would be unbound if define evaluated its target
    assert run("(define x 1)", env) == Number(1)
