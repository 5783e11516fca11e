"""Core evaluator for the Sprig interpreter.

Evaluation is plain recursion: there is no tail-call elimination, so a deeply
recursive Sprig program runs out of Python stack and surfaces as
RecursionError (the Interpreter reports it as SprigRecursionError).
"""

from __future__ import annotations

from typing import Optional

from sprig import SExpression, LispValue
from sprig.diagnostics import Diagnostics
from sprig.evaluation.apply import apply, home_of
from sprig.types.environment import Environment
from sprig.types.pair import Pair
from sprig.types.procedure import Closure, Primitive, SpecialForm
from sprig.types.symbol import Symbol


def evaluate(
    expr: SExpression, env: Environment, diagnostics: Optional[Diagnostics] = None
) -> LispValue:
    """
    Evaluate `expr` in `env`.

    Symbols are looked up, non-empty lists are applications, and everything
    else (numbers, the empty list, procedures) evaluates to itself. Errors
    are raised as SprigError subclasses.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    match expr:
        case Symbol():
            return env.lookup(expr)
        case Pair():
            return _evaluate_application(expr, env, diagnostics)

    # --- Atoms, Empty and procedures return as-is ---
    return expr


def _evaluate_application(
    expr: Pair, env: Environment, diagnostics: Diagnostics
) -> LispValue:
    diagnostics.debug("list eval: %s", expr)
    head, tail = expr.head, expr.tail

    # A symbol head is resolved by a single lookup, anything else is evaluated.
    if isinstance(head, Symbol):
        operator = env.lookup(head)
    else:
        operator = evaluate(head, env, diagnostics)

    match operator:
        case SpecialForm():
            return operator.handler(tail, env, home_of(operator), evaluate, diagnostics)
        case Closure() | Primitive():
            args = [evaluate(arg, env, diagnostics) for arg in tail]
            return apply(operator, args, evaluate, diagnostics)

    # Not a procedure: the list is data and evaluates to itself.
    diagnostics.debug("%s is not a procedure, returning list as is", operator)
    return expr
