from __future__ import annotations

import weakref
from typing import Literal, Optional, TextIO, Union

from sprig import SExpression, LispValue
from sprig import config
from sprig.builtin.env_builtin import register
from sprig.diagnostics import Diagnostics
from sprig.errors import SprigError, SprigRecursionError
from sprig.evaluation.evaluator import evaluate
from sprig.reader.parser import Reader
from sprig.types.environment import Environment
from sprig.types.expression import from_python, render

# `not` is derived from `if` rather than being a primitive.
CORE_PRELUDE = "(define not (lambda (x) (if x #f #t)))"


class Interpreter:
    """
    Owns the global environment and exposes the entry points a front end
    (REPL, script runner) needs: read, evaluate, eval a snippet, render and
    bind. Evaluation failures never escape `evaluate`/`eval`; they are
    reported to `diagnostics` and the call returns None.

    The builtins in the global frame reference that frame, so `close()` (or
    leaving a `with` block) breaks those references once the interpreter is
    no longer needed.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.diagnostics: Diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.env: Environment = Environment()
        self._closed = False
        # Character a Reader pushed back at the end of its last read, per
        # stream; the next read on that stream starts with it.
        self._pushback: weakref.WeakKeyDictionary[TextIO, str] = weakref.WeakKeyDictionary()
        register(self.env)
        self._run_prelude(CORE_PRELUDE)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = config.get_prelude_path()
            if path is not None:
                try:
                    code = path.read_text(encoding="utf-8")
                except FileNotFoundError:
                    # no prelude file: proceed with the core prelude only
                    code = None
                if code:
                    self._run_prelude(code)
        elif prelude:
            self._run_prelude(prelude)

    def _run_prelude(self, code: str) -> None:
        for expr in Reader(code, self.env, self.diagnostics):
            evaluate(expr, self.env, self.diagnostics)

    def _reader(self, source: Union[str, TextIO]) -> Reader:
        reader = Reader(source, self.env, self.diagnostics)
        if not isinstance(source, str) and source in self._pushback:
            reader.unread(self._pushback.pop(source))
        return reader

    def _keep_pushback(self, source: Union[str, TextIO], reader: Reader) -> None:
        if not isinstance(source, str) and reader.pending is not None:
            self._pushback[source] = reader.pending

    def _check_open(self) -> None:
        if self._closed:
            raise SprigError("interpreter is closed")

    def read(self, stream: Union[str, TextIO]) -> Optional[SExpression]:
        """Parse one expression from `stream`; None at end of input.

        Raises SprigParseError on malformed input, or SprigUnboundVariable
        for a bare top-level atom that names nothing.
        """
        self._check_open()
        reader = self._reader(stream)
        try:
            return reader.read()
        finally:
            self._keep_pushback(stream, reader)

    def evaluate(self, expr: SExpression) -> Optional[LispValue]:
        """Evaluate `expr` in the global environment; None on failure."""
        try:
            self._check_open()
            return evaluate(expr, self.env, self.diagnostics)
        except RecursionError:
            self.diagnostics.error(SprigRecursionError("maximum recursion depth exceeded"))
        except SprigError as err:
            self.diagnostics.error(err)
        return None

    def eval(self, code: Union[str, TextIO]) -> Optional[LispValue]:
        """Read and evaluate every expression in `code`; return the last result.

        Stops at the first failure, which is reported, and returns None.
        """
        result: Optional[LispValue] = None
        try:
            self._check_open()
            reader = self._reader(code)
            try:
                for expr in reader:
                    result = evaluate(expr, self.env, self.diagnostics)
            finally:
                self._keep_pushback(code, reader)
        except RecursionError:
            self.diagnostics.error(SprigRecursionError("maximum recursion depth exceeded"))
            return None
        except SprigError as err:
            self.diagnostics.error(err)
            return None
        return result

    @staticmethod
    def render(expr: SExpression) -> str:
        return render(expr)

    def bind(self, name: str, value: LispValue) -> None:
        """Bind or rebind `name` in the global environment.

        Plain Python ints, strs and lists are converted with `from_python`.
        """
        self._check_open()
        self.env.bind(name, from_python(value))

    def close(self) -> None:
        """Break the global frame <-> builtin reference cycle. Idempotent."""
        if self._closed:
            return
        self.env.break_procedure_references()
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> Interpreter:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
