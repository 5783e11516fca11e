"""Expression model and environments."""

from sprig.types.symbol import Symbol, TRUE, FALSE
from sprig.types.number import Number
from sprig.types.pair import Pair, Empty, EmptyType, cons, make_list
from sprig.types.procedure import Closure, Primitive, SpecialForm, Procedure
from sprig.types.environment import Environment
from sprig.types.expression import (
    Expression,
    as_number,
    decompose,
    from_python,
    is_list,
    is_procedure,
    is_true,
    render,
)

__all__ = [
    "Symbol", "TRUE", "FALSE", "Number", "Pair", "Empty", "EmptyType",
    "cons", "make_list", "Closure", "Primitive", "SpecialForm", "Procedure",
    "Environment", "Expression", "as_number", "decompose", "from_python",
    "is_list", "is_procedure", "is_true", "render",
]
