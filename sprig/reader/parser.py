"""
  Sprig Reader

- Character-at-a-time scanner over a string or text stream
- One expression per `read()` call, `None` at end of input
- Lists are read with an explicit depth counter and a stack of element
  buffers, one per open parenthesis, instead of recursing per level

    - integer tokens -> Number
    - any other token -> Symbol
    - (a b c)        -> Pair chain, () -> Empty
    - ; to end of line is a comment

Top-level atoms are special: when the reader is given an environment, a bare
atom is looked up and evaluated before it is returned. Atoms inside a list are
returned as read and only resolved later by the evaluator.
"""

from __future__ import annotations

import io
import re
from typing import Iterator, Optional, TextIO, Union

from sprig import SExpression
from sprig.config import INTEGER_MAX, INTEGER_MIN
from sprig.diagnostics import Diagnostics
from sprig.errors import SprigParseError, SprigUnboundVariable
from sprig.evaluation.evaluator import evaluate
from sprig.types.environment import Environment
from sprig.types.number import Number
from sprig.types.pair import make_list
from sprig.types.symbol import Symbol

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

COMMENT = ";"
OPEN = "("
CLOSE = ")"


def is_integer_token(token: str) -> bool:
    return INTEGER_RE.fullmatch(token) is not None


def create_atom(token: str) -> Union[Number, Symbol]:
    """Classify a token as a Number if it is an integer literal, else a Symbol."""
    if is_integer_token(token):
        value = int(token)
        if not INTEGER_MIN <= value <= INTEGER_MAX:
            raise SprigParseError(f"integer literal out of range: {token}")
        return Number(value)
    return Symbol(token)


class Reader:
    def __init__(
        self,
        source: Union[str, TextIO],
        env: Optional[Environment] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.stream: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self.env = env
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._pending: Optional[str] = None

    # ------------------------
    # Character level
    # ------------------------
    def _getc(self) -> str:
        """Next character, or '' at end of input."""
        if self._pending is not None:
            c, self._pending = self._pending, None
            return c
        return self.stream.read(1)

    def unread(self, c: str) -> None:
        """Push `c` back; the next character read is `c`."""
        self._pending = c

    @property
    def pending(self) -> Optional[str]:
        """Character pushed back but not yet read again, if any."""
        return self._pending

    def _skip_blank(self) -> str:
        """Skip whitespace and comments; return the first other character."""
        while True:
            c = self._getc()
            if c == COMMENT:
                while c and c != "\n":
                    c = self._getc()
                continue
            if not c or not c.isspace():
                return c

    # ------------------------
    # Expressions
    # ------------------------
    def read(self) -> Optional[SExpression]:
        """Read one expression; None when the input is exhausted."""
        c = self._skip_blank()
        if not c:
            return None
        if c == CLOSE:
            raise SprigParseError("unexpected ')'")
        if c != OPEN:
            token = self._read_token(c)
            if self.env is None:
                return create_atom(token)
            return self._resolve_top_level(token)
        return self._read_list()

    def read_all(self) -> Iterator[SExpression]:
        while (expr := self.read()) is not None:
            yield expr

    __iter__ = read_all

    def _read_token(self, first: str) -> str:
        chars = [first]
        while True:
            c = self._getc()
            if not c or c.isspace():
                break
            if c in (OPEN, CLOSE, COMMENT):
                self.unread(c)
                break
            chars.append(c)
        return "".join(chars)

    def _resolve_top_level(self, token: str) -> SExpression:
        try:
            value = self.env.lookup(token)
        except SprigUnboundVariable:
            if not is_integer_token(token):
                raise SprigUnboundVariable(token, f"undefined variable: {token}") from None
            value = create_atom(token)
        return evaluate(value, self.env, self.diagnostics)

    def _read_list(self) -> SExpression:
        """Read the rest of a list whose '(' was just consumed."""
        depth = 1
        levels: list[list[SExpression]] = [[]]
        token: list[str] = []
        in_comment = False
        # A bad literal is held until the closing paren so the next read
        # starts after this list, not inside it.
        failure: Optional[SprigParseError] = None

        def flush() -> None:
            nonlocal failure
            if token:
                try:
                    levels[-1].append(create_atom("".join(token)))
                except SprigParseError as err:
                    self.diagnostics.debug("skipping rest of list: %s", err)
                    failure = failure or err
                token.clear()

        while True:
            c = self._getc()
            if not c:
                raise SprigParseError(
                    f"unbalanced parentheses: end of input with {depth} unclosed '('"
                )
            if in_comment:
                in_comment = c != "\n"
                continue
            if c.isspace():
                flush()
            elif c == COMMENT:
                # The comment does not end a token: "ab;x\ncd" reads as abcd.
                in_comment = True
            elif c == OPEN:
                flush()
                depth += 1
                levels.append([])
            elif c == CLOSE:
                flush()
                depth -= 1
                lst = make_list(levels.pop())
                self.diagnostics.debug("read list: %s", lst)
                if depth == 0:
                    if failure is not None:
                        raise failure
                    return lst
                levels[-1].append(lst)
            else:
                token.append(c)
