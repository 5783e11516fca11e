from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.diagnostics import Diagnostics
from sprig.errors import SprigArityError, SprigTypeError
from sprig.evaluation.special_forms.lambda_form import lambda_form
from sprig.types.environment import Environment
from sprig.types.expression import decompose, list_length, render
from sprig.types.pair import Pair, make_list
from sprig.types.symbol import Symbol


def define_form(
    tail: SExpression,
    env: Environment,
    home: Environment,
    evaluate_fn: EvaluatorFn,
    diagnostics: Diagnostics,
) -> LispValue:
    """
    (define name value)
    (define (name params...) body)

    The value is computed in the caller's environment but always bound in
    `home`, the global frame; defines are never local. Returns the value.
    """
    count = list_length(tail)
    if count < 2:
        raise SprigArityError(
            f"not enough arguments for define. (Expected: 2, got: {count})"
        )
    target, rest = decompose(tail)
    value_expr, _ = decompose(rest)

    match target:
        case Symbol():
            name = target
            value = evaluate_fn(value_expr, env, diagnostics)
        case Pair(head=Symbol() as name, tail=params):
            value = lambda_form(
                make_list([params, value_expr]), env, home, evaluate_fn, diagnostics
            )
        case _:
            raise SprigTypeError(f"define expects a name, got {render(target)}")

    home.bind(name, value)
    return value
