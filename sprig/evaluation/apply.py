"""Application engine for Sprig.

Centralizes what happens once the evaluator has an applicative procedure and
a list of already-evaluated arguments:
- Closures get a fresh frame under their captured environment, and the body
  is evaluated there. The caller's environment plays no part (lexical scope).
- Primitives are Python callables invoked with their home environment and
  the argument list.
"""

from __future__ import annotations

from sprig import EvaluatorFn, LispValue
from sprig.diagnostics import Diagnostics
from sprig.errors import SprigError, SprigTypeError
from sprig.types.environment import Environment
from sprig.types.procedure import Closure, Primitive, Procedure
from sprig.types.expression import render


def home_of(proc: Procedure) -> Environment:
    """The environment `proc` was created in; fails once it was detached."""
    if proc.env is None:
        raise SprigError(f"{render(proc)} is detached from its environment")
    return proc.env


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    diagnostics: Diagnostics,
) -> LispValue:
    diagnostics.debug("lambda eval: func: %s, body: %s", fn, fn.body)
    frame = Environment.new_child_frame(
        home_of(fn), fn.params, args, diagnostics=diagnostics
    )
    result = evaluate_fn(fn.body, frame, diagnostics)
    diagnostics.debug(" result: %s", result)
    return result


def apply(
    head: Procedure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    diagnostics: Diagnostics,
) -> LispValue:
    """Apply a Closure or Primitive to evaluated arguments."""
    match head:
        case Closure():
            return apply_closure(head, args, evaluate_fn, diagnostics)
        case Primitive():
            return head.fn(home_of(head), args)
        case _:
            raise SprigTypeError(f"Cannot apply {render(head)} to evaluated arguments")
