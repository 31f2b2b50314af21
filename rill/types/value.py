"""Projections over the value model that are defined for only some variants."""

from __future__ import annotations

from rill import LispValue
from rill.errors import RillTypeError
from rill.types.function import Func, Closure
from rill.types.hash_map import HashMap
from rill.types.nil import NilType
from rill.types.sequence import Sequence

# Variants carrying a metadata slot
META_TYPES = (Sequence, HashMap, Func, Closure)


def count(value: LispValue) -> int:
    if isinstance(value, Sequence):
        return len(value.items)
    if isinstance(value, NilType):
        return 0
    raise RillTypeError(f"invalid type for count: {value!r}")


def is_empty(value: LispValue) -> bool:
    if isinstance(value, Sequence):
        return not value.items
    if isinstance(value, NilType):
        return True
    raise RillTypeError(f"invalid type for empty?: {value!r}")


def get_meta(value: LispValue) -> LispValue:
    if not isinstance(value, META_TYPES):
        raise RillTypeError(f"invalid type for meta: {value!r}")
    return value.meta


def with_meta(value: LispValue, meta: LispValue) -> LispValue:
    """Return a copy of `value` sharing its payload but carrying `meta`."""
    if not isinstance(value, META_TYPES):
        raise RillTypeError(f"invalid type for with-meta: {value!r}")
    return value.with_meta(meta)
