from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.diagnostics import Diagnostics
from sprig.errors import SprigArityError
from sprig.types.environment import Environment
from sprig.types.expression import decompose, is_true, list_length
from sprig.types.pair import Pair
from sprig.types.symbol import FALSE


def if_form(
    tail: SExpression,
    env: Environment,
    home: Environment,
    evaluate_fn: EvaluatorFn,
    diagnostics: Diagnostics,
) -> LispValue:
    count = list_length(tail)
    if count < 2:
        raise SprigArityError("if requires a condition and a then-expression")

    test, rest = decompose(tail)
    then_expr, rest = decompose(rest)

    # Only the selected branch is evaluated.
    if is_true(evaluate_fn(test, env, diagnostics)):
        return evaluate_fn(then_expr, env, diagnostics)
    elif isinstance(rest, Pair):
        return evaluate_fn(rest.head, env, diagnostics)
    else:
        return home.lookup(FALSE)  # no else branch
