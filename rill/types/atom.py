"""Atom: the single mutable cell in an otherwise immutable data model."""

from __future__ import annotations

from rill import LispValue
from rill.evaluation.apply import apply


class Atom:
    __slots__ = ("value",)

    def __init__(self, value: LispValue):
        self.value: LispValue = value

    def deref(self) -> LispValue:
        return self.value

    def reset(self, value: LispValue) -> LispValue:
        self.value = value
        return value

    def swap(self, fn: LispValue, *args: LispValue) -> LispValue:
        """Store fn(current, *args) and return it; on error the cell is untouched."""
        new_value = apply(fn, [self.value, *args])
        self.value = new_value
        return new_value

    def __repr__(self) -> str:
        return f"(atom {self.value!r})"
