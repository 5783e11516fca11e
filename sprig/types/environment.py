"""Runtime environment for Sprig.

An Environment is one frame of bindings from names to expressions plus a link
to the enclosing frame. The global frame has no parent. A frame is created for
the global scope when the interpreter starts and once per closure call.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Iterable, Optional

from sprig import EvaluatorFn, LispValue
from sprig.errors import SprigArityError, SprigTypeError, SprigUnboundVariable
from sprig.types.procedure import PROCEDURE_TYPES
from sprig.types.symbol import Symbol

if TYPE_CHECKING:
    from sprig.diagnostics import Diagnostics


def _name_of(name: str | Symbol) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return name
    raise SprigTypeError(f"Cannot bind {name} as a variable name")


class Environment:
    """Chained mapping from names to Sprig values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def new_child_frame(
        cls,
        parent: Optional[Environment],
        param_names: list[str],
        arguments: Iterable[LispValue],
        context: Optional[Environment] = None,
        evaluate_fn: Optional[EvaluatorFn] = None,
        diagnostics: Optional[Diagnostics] = None,
    ) -> Environment:
        """Create a frame under `parent` binding `param_names` to `arguments`.

        When `context` and `evaluate_fn` are supplied the arguments are
        expressions, evaluated left to right in `context` before binding;
        otherwise they are bound as they are. Supplying fewer arguments than
        parameters raises SprigArityError. Extra arguments are ignored.
        """
        args = list(arguments)
        if len(args) < len(param_names):
            raise SprigArityError(
                f"more names than values for environment bindings "
                f"(expected {len(param_names)}, got {len(args)})"
            )
        frame = cls(outer=parent)
        for name, arg in zip(param_names, args):
            if context is not None and evaluate_fn is not None:
                arg = evaluate_fn(arg, context, diagnostics)
            frame.bind(name, arg)
            if diagnostics is not None:
                diagnostics.debug("environment binding %s to %s", name, arg)
        return frame

    def bind(self, name: str | Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any previous binding."""
        self.vars[_name_of(name)] = value

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-bind a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.bind(k, v)

    def find(self, name: str | Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _name_of(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str | Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises SprigUnboundVariable if no frame in the chain binds it.
        """
        key = _name_of(name)
        env = self.find(key)
        if env is None:
            raise SprigUnboundVariable(key)
        return env.vars[key]

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def break_procedure_references(self) -> None:
        """Detach every procedure bound directly in this frame from its env.

        Builtins bound in the global frame point back at it. Call this once,
        on the global frame, when the interpreter shuts down; procedures that
        are still in use stop working afterwards.
        """
        for value in self.vars.values():
            if isinstance(value, PROCEDURE_TYPES):
                value.detach()

    def __contains__(self, name: str | Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def describe(self) -> str:
        """List every binding, outermost frame first, one per line."""
        frames = []
        env: Optional[Environment] = self
        while env is not None:
            frames.append(env)
            env = env.outer
        with StringIO() as buffer:
            buffer.write("Environment: \n")
            for frame in reversed(frames):
                for k, v in frame.vars.items():
                    buffer.write(f" {k} : {v}\n")
            return buffer.getvalue()

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
