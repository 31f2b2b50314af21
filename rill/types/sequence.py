"""List and Vector: immutable sequences with an attached metadata slot.

Both wrap a tuple. Constructing from a tuple shares it, constructing from
anything else copies it, so a sequence never observes later changes to
the iterable it was built from.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from rill import LispValue
from rill.types.nil import Nil


class Sequence:
    __slots__ = ("items", "meta")

    def __init__(self, items: Iterable[LispValue] = (), meta: LispValue = Nil):
        self.items: tuple = items if isinstance(items, tuple) else tuple(items)
        self.meta: LispValue = meta

    def with_meta(self, meta: LispValue) -> Sequence:
        # Shares the backing tuple; the receiver keeps its own metadata
        return type(self)(self.items, meta)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self.items[index])
        return self.items[index]

    def __eq__(self, other) -> bool:
        from rill.types.equality import equals
        return equals(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(x) for x in self.items)})"


class List(Sequence):
    __slots__ = ()

    def __str__(self) -> str:
        return "(" + " ".join(str(x) for x in self.items) + ")"


class Vector(Sequence):
    __slots__ = ()

    def __str__(self) -> str:
        return "[" + " ".join(str(x) for x in self.items) + "]"


def list_(*items: LispValue) -> List:
    return List(items)


def vector(*items: LispValue) -> Vector:
    return Vector(items)
