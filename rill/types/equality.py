from __future__ import annotations

from rill import LispValue
from rill.types.atom import Atom
from rill.types.function import Func, Closure
from rill.types.hash_map import HashMap
from rill.types.nil import NilType
from rill.types.sequence import Sequence
from rill.types.symbol import Symbol


def equals(a: LispValue, b: LispValue) -> bool:
    """Structural equality for Lisp values.

    - List and Vector compare equal to each other when elementwise equal.
    - Hash maps are equal when their key sets match and values are equal.
    - Metadata is ignored.
    - Functions and closures are never equal, not even to themselves.
    - Atoms are equal only when they are the same cell.
    - Booleans never equal integers, unlike Python's True == 1.
    """
    if isinstance(a, (Func, Closure)) or isinstance(b, (Func, Closure)):
        return False
    if isinstance(a, Sequence):
        if not isinstance(b, Sequence) or len(a) != len(b):
            return False
        return all(equals(x, y) for x, y in zip(a.items, b.items))
    if isinstance(a, HashMap):
        if not isinstance(b, HashMap) or a.data.keys() != b.data.keys():
            return False
        return all(equals(v, b.data[k]) for k, v in a.data.items())
    if isinstance(a, Atom):
        return a is b
    if isinstance(a, NilType):
        return isinstance(b, NilType)
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, int):
        return isinstance(b, int) and a == b
    if isinstance(a, (str, Symbol)):
        return type(a) is type(b) and a == b
    return a is b
