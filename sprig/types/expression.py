"""The Expression union and the operations other components use on it.

Code outside sprig.types does not look inside Pair or Number cells directly;
it goes through the accessors here (`decompose`, `as_number`, ...), and
printing goes through `render`.
"""

from __future__ import annotations

from io import StringIO
from typing import Union

from sprig.errors import SprigTypeError
from sprig.types.number import Number
from sprig.types.pair import Empty, EmptyType, Pair, make_list
from sprig.types.procedure import Closure, Primitive, SpecialForm, PROCEDURE_TYPES
from sprig.types.symbol import FALSE, Symbol

Expression = Union[Number, Symbol, Pair, EmptyType, Closure, Primitive, SpecialForm]
ListExpression = Union[Pair, EmptyType]


def is_true(expr: Expression) -> bool:
    """Everything is true except the symbol #f."""
    return expr != FALSE


def is_list(expr: Expression) -> bool:
    return isinstance(expr, (Pair, EmptyType))


def is_atom(expr: Expression) -> bool:
    return isinstance(expr, (Number, Symbol))


def is_procedure(expr: Expression) -> bool:
    return isinstance(expr, PROCEDURE_TYPES)


def decompose(expr: Expression) -> tuple[Expression, ListExpression]:
    """Split a non-empty list into its head and tail."""
    if not isinstance(expr, Pair):
        raise SprigTypeError(f"{render(expr)} is not a non-empty list")
    return expr.head, expr.tail


def as_number(expr: Expression) -> int:
    if not isinstance(expr, Number):
        raise SprigTypeError(f"{render(expr)} is not a number")
    return expr.value


def list_length(expr: ListExpression) -> int:
    if not is_list(expr):
        raise SprigTypeError(f"{render(expr)} is not a list")
    return len(expr)


def from_python(value) -> Expression:
    """Build an expression from Python literals.

    ints become Numbers, strs become Symbols and lists or tuples become
    lists, recursively. Values that already are expressions pass through.
    """
    if isinstance(value, (Number, Symbol, Pair, EmptyType) + PROCEDURE_TYPES):
        return value
    if isinstance(value, bool):
        raise SprigTypeError(f"Cannot convert {value!r} to an expression")
    if isinstance(value, int):
        return Number(value)
    if isinstance(value, str):
        return Symbol(value)
    if isinstance(value, (list, tuple)):
        return make_list(from_python(v) for v in value)
    raise SprigTypeError(f"Cannot convert {value!r} to an expression")


def _write(expr: Expression, buffer: StringIO) -> None:
    match expr:
        case Number(value=value):
            buffer.write(str(value))
        case Symbol(id=name):
            buffer.write(name)
        case EmptyType():
            buffer.write("()")
        case Pair():
            buffer.write("(")
            prefix = ""
            for item in expr:
                buffer.write(prefix)
                _write(item, buffer)
                prefix = " "
            buffer.write(")")
        case Closure(params=params, body=body):
            buffer.write("(lambda (")
            buffer.write(" ".join(params))
            buffer.write(") ")
            _write(body, buffer)
            buffer.write(")")
        case Primitive(name=name):
            buffer.write(f"#<primitive {name}>")
        case SpecialForm(name=name):
            buffer.write(f"#<special-form {name}>")
        case _:
            raise SprigTypeError(f"Cannot render {expr!r}")


def render(expr: Expression) -> str:
    """Canonical text of `expr`: what the reader would read back."""
    with StringIO() as buffer:
        _write(expr, buffer)
        return buffer.getvalue()
