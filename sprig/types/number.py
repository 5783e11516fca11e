from __future__ import annotations

from sprig.config import INTEGER_BITS

_MASK = (1 << INTEGER_BITS) - 1
_SIGN = 1 << (INTEGER_BITS - 1)


def wrap_int(value: int) -> int:
    """Reduce `value` to a signed INTEGER_BITS-wide two's complement int."""
    value &= _MASK
    return value - (1 << INTEGER_BITS) if value & _SIGN else value


class Number:
    """A fixed-width signed integer. Numbers evaluate to themselves."""

    __slots__ = ("value",)

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Number requires an int, got {value!r}")
        self.value: int = wrap_int(value)

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("Number", self.value))

    def __repr__(self):
        return f"Number({self.value})"

    def __str__(self):
        return str(self.value)
