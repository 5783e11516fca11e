"""Persistent singly-linked lists.

A list is a chain of Pair cells terminated by the Empty singleton. Cells are
never mutated after construction, so lists can share tails freely.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Union


class EmptyType:
    """The empty list. There is exactly one instance, `Empty`."""

    __slots__ = ()
    _instance: EmptyType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __iter__(self) -> Iterator:
        return iter(())

    def __len__(self) -> int:
        return 0

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EmptyType)

    def __hash__(self) -> int:
        return hash("Empty")

    def __reduce__(self):
        return (EmptyType, ())

    def __repr__(self):
        return "Empty"

    def __str__(self):
        return "()"


Empty = EmptyType()


class Pair:
    """A cons cell: `head` is any expression, `tail` is a Pair or Empty."""

    __slots__ = ("head", "tail")

    def __init__(self, head, tail: Union[Pair, EmptyType] = Empty):
        if not isinstance(tail, (Pair, EmptyType)):
            raise TypeError(f"Pair tail must be a list, got {tail!r}")
        self.head = head
        self.tail: Union[Pair, EmptyType] = tail

    def __iter__(self) -> Iterator:
        cell: Union[Pair, EmptyType] = self
        while isinstance(cell, Pair):
            yield cell.head
            cell = cell.tail

    def __len__(self) -> int:
        n = 0
        for _ in self:
            n += 1
        return n

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return False
        a: Union[Pair, EmptyType] = self
        b: Union[Pair, EmptyType] = other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return a is b

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self):
        return f"Pair({', '.join(repr(x) for x in self)})"

    def __str__(self):
        from sprig.types.expression import render
        return render(self)


def cons(head, tail: Union[Pair, EmptyType] = Empty) -> Pair:
    return Pair(head, tail)


def make_list(items: Iterable) -> Union[Pair, EmptyType]:
    """Build a list holding `items` in order; an empty iterable gives Empty."""
    result: Union[Pair, EmptyType] = Empty
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result
