from __future__ import annotations
import sys

from rill.errors import RillTypeError


class Symbol:
    """A lexical name, resolved through an Environment chain."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise RillTypeError(f"symbol name must be a non-empty string: {name!r}")
        # Interned names make equality and dict lookups cheap
        self.name: str = sys.intern(name)

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash((Symbol, self.name))

    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    def __str__(self) -> str:
        return self.name


# Marker used in parameter lists to capture the remaining arguments
REST_MARKER = Symbol("&")
