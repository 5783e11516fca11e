# Core type aliases for Sprig.
# Expressions are a closed set of classes living in sprig.types; these aliases
# exist so signatures across the package read the same way.
#
# Naming guidance:
# - SExpression: syntactic forms as produced by the reader (code-as-data).
# - LispValue:  evaluated runtime values.
# Both resolve to the Expression union, they are interchangeable.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: the evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]
