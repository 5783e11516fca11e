"""Built-in procedures for the Sprig runtime environment.

This module defines the arithmetic, comparison and boolean-aggregate
primitives and `register`, which installs them, the special forms and the
boolean literals into a global frame.

Every primitive has the calling convention `fn(env, args)`: `env` is the
frame the primitive was registered in (the global frame) and `args` the
already-evaluated argument values.
"""
from __future__ import annotations

import operator
from typing import Callable

from sprig import LispValue
from sprig.errors import (
    SprigArityError,
    SprigDivisionByZero,
    SprigTypeError,
    SprigUnboundVariable,
)
from sprig.evaluation.special_forms import SPECIAL_FORMS
from sprig.types.environment import Environment
from sprig.types.expression import is_true, render
from sprig.types.number import Number
from sprig.types.procedure import Primitive, SpecialForm
from sprig.types.symbol import FALSE, TRUE, Symbol


def check_number(expr: LispValue) -> int:
    """Return the int inside a Number argument.

    A symbol here means a name that did not resolve to a number, which is
    reported as unbound rather than as a type error.
    """
    if isinstance(expr, Symbol):
        raise SprigUnboundVariable(expr.id, f"{expr} is unbound")
    if not isinstance(expr, Number):
        raise SprigTypeError(f"{render(expr)} is not a number")
    return expr.value


def _require_at_least(name: str, args: list[LispValue], n: int) -> None:
    if len(args) < n:
        raise SprigArityError(
            f"not enough arguments for {name}. (Expected: at least {n}, got: {len(args)})"
        )


# -------------------------------
# Arithmetic
# -------------------------------
def _truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(left) // abs(right)
    return q if (left < 0) == (right < 0) else -q


def _any_operands(left: int, right: int) -> None:
    return None


def _nonzero_divisor(left: int, right: int) -> None:
    if right == 0:
        raise SprigDivisionByZero("division by zero.")


def arithmetic(
    name: str,
    op: Callable[[int, int], int],
    check: Callable[[int, int], None] = _any_operands,
) -> Callable[[Environment, list[LispValue]], Number]:
    """Build a left fold over two or more numeric arguments.

    `check` validates each (accumulator, operand) pair before `op` runs.
    """

    def fold(env: Environment, args: list[LispValue]) -> Number:
        _require_at_least(name, args, 2)
        result = check_number(args[0])
        for arg in args[1:]:
            value = check_number(arg)
            check(result, value)
            result = Number(op(result, value)).value
        return Number(result)

    fold.__name__ = f"basic{name}"
    return fold


add = arithmetic("+", operator.add)
sub = arithmetic("-", operator.sub)
mul = arithmetic("*", operator.mul)
div = arithmetic("/", _truncating_div, _nonzero_divisor)


# -------------------------------
# Comparison
# -------------------------------
def comparison(
    name: str, op: Callable[[int, int], bool]
) -> Callable[[Environment, list[LispValue]], LispValue]:
    """Build a chained comparison: (< a b c) holds iff a < b and b < c."""

    def compare(env: Environment, args: list[LispValue]) -> LispValue:
        _require_at_least(name, args, 2)
        values = [check_number(arg) for arg in args]
        holds = all(op(a, b) for a, b in zip(values, values[1:]))
        return env.lookup(TRUE) if holds else env.lookup(FALSE)

    compare.__name__ = f"basic{name}"
    return compare


less = comparison("<", operator.lt)
greater = comparison(">", operator.gt)
equal = comparison("=", operator.eq)


# -------------------------------
# Boolean aggregates
# -------------------------------
def and_all(env: Environment, args: list[LispValue]) -> LispValue:
    """(and a b ...): the bound #f at the first false argument, else #t."""
    _require_at_least("and", args, 1)
    for arg in args:
        if not is_true(arg):
            return env.lookup(FALSE)
    return env.lookup(TRUE)


def or_any(env: Environment, args: list[LispValue]) -> LispValue:
    """(or a b ...): the bound #t at the first true argument, else #f."""
    _require_at_least("or", args, 1)
    for arg in args:
        if is_true(arg):
            return env.lookup(TRUE)
    return env.lookup(FALSE)


PRIMITIVES: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "and": and_all,
    "or": or_any,
    "<": less,
    ">": greater,
    "=": equal,
    "+": add,
    "*": mul,
    "-": sub,
    "/": div,
}


def register(env: Environment) -> None:
    """Install special forms, #t, #f and the primitives into `env`.

    Each builtin captures `env` itself, so it sees later rebindings there.
    """
    for name, handler in SPECIAL_FORMS.items():
        env.bind(name, SpecialForm(name, handler, env))
    env.bind(TRUE, TRUE)
    env.bind(FALSE, FALSE)
    for name, fn in PRIMITIVES.items():
        env.bind(name, Primitive(name, fn, env))
