"""Procedure values.

There are three kinds of procedure and they share no behaviour, only the fact
that they can sit in operator position:

- Closure: created by `lambda`; arguments are evaluated by the caller and
  bound in a child of the closure's captured environment.
- Primitive: a builtin implemented in Python; arguments are evaluated by the
  caller and handed over as a Python list.
- SpecialForm: a builtin that receives its operands unevaluated together with
  the caller's environment.

Every kind holds a reference to the environment it was created in. For the
builtins that environment is the global frame, which in turn binds them; the
interpreter breaks that cycle at shutdown through `detach()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Union

if TYPE_CHECKING:
    from sprig.types.environment import Environment


class Closure:
    """A first-class lambda with parameter names, body, and captured env."""

    __slots__ = ("env", "params", "body")

    def __init__(self, env: Optional[Environment], params: list[str], body):
        self.env: Optional[Environment] = env
        self.params: list[str] = list(params)
        self.body = body

    def detach(self) -> None:
        self.env = None

    def __repr__(self) -> str:
        return f"<Closure ({' '.join(self.params)})>"

    def __str__(self) -> str:
        from sprig.types.expression import render
        return render(self)


class Primitive:
    """A builtin applicative procedure: `fn(env, args)` with evaluated args."""

    __slots__ = ("name", "fn", "env")

    def __init__(self, name: str, fn: Callable, env: Optional[Environment]):
        self.name = name
        self.fn = fn
        self.env: Optional[Environment] = env

    def detach(self) -> None:
        self.env = None

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"

    def __str__(self) -> str:
        return f"#<primitive {self.name}>"


class SpecialForm:
    """A builtin that controls the evaluation of its own operands.

    `handler(tail, env, home, evaluate_fn, diagnostics)` gets the unevaluated
    operand list, the caller's environment and `home`, the environment the
    form was registered in.
    """

    __slots__ = ("name", "handler", "env")

    def __init__(self, name: str, handler: Callable, env: Optional[Environment]):
        self.name = name
        self.handler = handler
        self.env: Optional[Environment] = env

    def detach(self) -> None:
        self.env = None

    def __repr__(self) -> str:
        return f"<SpecialForm {self.name}>"

    def __str__(self) -> str:
        return f"#<special-form {self.name}>"


Procedure = Union[Closure, Primitive, SpecialForm]
PROCEDURE_TYPES = (Closure, Primitive, SpecialForm)
