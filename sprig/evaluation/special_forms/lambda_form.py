from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.diagnostics import Diagnostics
from sprig.errors import SprigArityError, SprigTypeError
from sprig.types.environment import Environment
from sprig.types.expression import decompose, is_list, list_length, render
from sprig.types.procedure import Closure
from sprig.types.symbol import Symbol


def parameter_names(params: SExpression) -> list[str]:
    """Names from a parameter list such as (x y); each entry must be a symbol."""
    if not is_list(params):
        raise SprigTypeError(f"lambda expects a parameter list, got {render(params)}")
    names = []
    for p in params:
        if not isinstance(p, Symbol):
            raise SprigTypeError(f"lambda parameter {render(p)} is not a symbol")
        names.append(p.id)
    return names


def lambda_form(
    tail: SExpression,
    env: Environment,
    home: Environment,
    evaluate_fn: EvaluatorFn,
    diagnostics: Diagnostics,
) -> LispValue:
    """
    (lambda (params...) body)
    Nothing is evaluated; the closure captures `env`, the environment the
    lambda expression appears in. Only the first body expression is kept.
    """
    count = list_length(tail)
    if count < 2:
        raise SprigArityError(
            f"not enough arguments for lambda. (Expected: 2, got: {count})"
        )
    params, rest = decompose(tail)
    body, _ = decompose(rest)
    names = parameter_names(params)
    diagnostics.debug("args: %s, body: %s", params, body)
    return Closure(env, names, body)
