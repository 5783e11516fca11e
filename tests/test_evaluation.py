import pytest

from sprig.errors import SprigArityError, SprigError, SprigUnboundVariable
from sprig.evaluation.evaluator import evaluate
from sprig.reader.parser import Reader
from sprig.types.environment import Environment
from sprig.types.expression import from_python, render
from sprig.types.number import Number
from sprig.types.pair import Empty, make_list
from sprig.types.procedure import Closure, Primitive, SpecialForm
from sprig.types.symbol import Symbol


def run(source, env):
    result = None
    for expr in Reader(source).read_all():
        result = evaluate(expr, env)
    return result


# -----------------------------------------------------
# Self-evaluation and lookup
# -----------------------------------------------------

def test_self_evaluating_values(env):
    assert evaluate(Number(1), env) == Number(1)
    assert evaluate(Empty, env) is Empty
    closure = Closure(env, ["x"], Symbol("x"))
    assert evaluate(closure, env) is closure
    plus = env.lookup("+")
    assert evaluate(plus, env) is plus


def test_symbol_lookup(env):
    env.bind("x", Number(42))
    assert evaluate(Symbol("x"), env) == Number(42)
    with pytest.raises(SprigUnboundVariable):
        evaluate(Symbol("z"), env)


def test_builtins_are_procedures(env):
    assert isinstance(env.lookup("define"), SpecialForm)
    assert isinstance(env.lookup("lambda"), SpecialForm)
    assert isinstance(env.lookup("if"), SpecialForm)
    for name in ["and", "or", "<", ">", "=", "+", "-", "*", "/"]:
        assert isinstance(env.lookup(name), Primitive)
    assert env.lookup("#t") == Symbol("#t")
    assert env.lookup("#f") == Symbol("#f")


def test_expression_built_from_python(env):
    expr = from_python(["+", 1, ["*", 2, 3]])
    assert evaluate(expr, env) == Number(7)


# -----------------------------------------------------
# Application
# -----------------------------------------------------

def test_lambda_application(env):
    assert run("((lambda (a b) (+ a b)) 2 3)", env) == Number(5)


def test_head_expression_is_evaluated(env):
    assert run("((if #t + *) 2 3)", env) == Number(5)
    assert run("((if #f + *) 2 3)", env) == Number(6)


def test_closure_uses_defining_environment(env):
    source = """
    (define n 100)
    (define (make-adder n) (lambda (x) (+ x n)))
    (define add3 (make-adder 3))
    ((lambda (n) (add3 4)) 50)
    """
    assert run(source, env) == Number(7)


def test_arguments_evaluated_in_caller_environment(env):
    source = """
    (define (f x) x)
    ((lambda (y) (f y)) 9)
    """
    assert run(source, env) == Number(9)


def test_arguments_evaluated_left_to_right_and_stop_at_failure(env):
    with pytest.raises(SprigError):
        run("(+ (define a 1) (/ 1 0) (define b 2))", env)
    assert env.lookup("a") == Number(1)
    with pytest.raises(SprigUnboundVariable):
        env.lookup("b")


def test_too_few_arguments_to_closure(env):
    with pytest.raises(SprigArityError):
        run("((lambda (x y) x) 1)", env)


def test_extra_arguments_to_closure_are_ignored(env):
    assert run("((lambda (x) x) 1 2 3)", env) == Number(1)


def test_list_with_non_procedure_head_is_data(env):
    expr = make_list([Number(1), Number(2), Number(3)])
    assert evaluate(expr, env) is expr
    env.bind("x", Number(5))
    assert render(run("(x 1)", env)) == "(x 1)"


def test_unbound_operator(env):
    with pytest.raises(SprigUnboundVariable) as exc:
        run("(frobnicate 1 2)", env)
    assert exc.value.name == "frobnicate"


def test_user_redefinition_of_primitive(env):
    run("(define + *)", env)
    assert run("(+ 2 3)", env) == Number(6)


def test_recursion(env):
    source = """
    (define (fact n) (if (< n 2) 1 (* n (fact (- n 1)))))
    (fact 10)
    """
    assert run(source, env) == Number(3628800)


def test_mutual_recursion_through_globals(env):
    source = """
    (define (even? n) (if (= n 0) #t (odd? (- n 1))))
    (define (odd? n) (if (= n 0) #f (even? (- n 1))))
    (even? 10)
    """
    assert run(source, env) == Symbol("#t")


def test_unbounded_recursion_exhausts_the_stack(env):
    # No tail-call elimination: runaway recursion surfaces as RecursionError.
    run("(define (loop n) (loop n))", env)
    with pytest.raises(RecursionError):
        run("(loop 1)", env)


def test_detached_procedure_cannot_run(env):
    env.break_procedure_references()
    with pytest.raises(SprigError):
        run("(+ 1 2)", env)


def test_evaluate_does_not_touch_caller_frame(env):
    local = Environment(outer=env)
    local.bind("x", Number(1))
    run("(define (f) x)", env)
    with pytest.raises(SprigUnboundVariable):
        evaluate(Reader("(f)").read(), local)
