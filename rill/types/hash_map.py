"""Hash maps from string/keyword keys to values.

The dict held by a HashMap is never mutated after construction; assoc and
dissoc build a new dict and a new HashMap with metadata reset to Nil.
"""

from __future__ import annotations

from typing import Iterator, Sequence as PySequence

from rill import LispValue
from rill.errors import RillArityError, RillTypeError
from rill.types.nil import Nil


class HashMap:
    __slots__ = ("data", "meta")

    def __init__(self, data: dict[str, LispValue] | None = None, meta: LispValue = Nil):
        # Copy so later changes to the caller's dict are never observed
        self.data: dict[str, LispValue] = {} if data is None else dict(data)
        self.meta: LispValue = meta

    @classmethod
    def _owning(cls, data: dict[str, LispValue], meta: LispValue = Nil) -> HashMap:
        # Adopts `data` without copying; only for dicts nobody else holds
        hm = cls.__new__(cls)
        hm.data = data
        hm.meta = meta
        return hm

    def with_meta(self, meta: LispValue) -> HashMap:
        return HashMap._owning(self.data, meta)

    def get(self, key: str, default: LispValue = Nil) -> LispValue:
        return self.data.get(key, default)

    def keys(self):
        return self.data.keys()

    def values(self):
        return self.data.values()

    def items(self):
        return self.data.items()

    def __contains__(self, key) -> bool:
        return key in self.data

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.data)

    def __eq__(self, other) -> bool:
        from rill.types.equality import equals
        return equals(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.data.items())
        return f"HashMap({{{body}}})"

    def __str__(self) -> str:
        return "{" + " ".join(f"{k} {v}" for k, v in self.data.items()) + "}"


def _check_key(key: LispValue) -> str:
    if not isinstance(key, str):
        raise RillTypeError(f"key is not string: {key!r}")
    return key


def _pairs(kvs: PySequence[LispValue]) -> list[tuple[str, LispValue]]:
    # Validate everything up front so a bad item never leaves a partial map
    if len(kvs) % 2 != 0:
        raise RillArityError("odd number of elements")
    return [(_check_key(k), v) for k, v in zip(kvs[::2], kvs[1::2])]


def _as_hash_map(value: LispValue, op: str) -> HashMap:
    if not isinstance(value, HashMap):
        raise RillTypeError(f"{op} expects a hash-map, got {value!r}")
    return value


def hash_map(kvs: PySequence[LispValue]) -> HashMap:
    """Build a hash map from a flat key/value list."""
    return HashMap._owning(dict(_pairs(list(kvs))))


def assoc(hm: LispValue, kvs: PySequence[LispValue]) -> HashMap:
    """Return a new hash map extending `hm` with the key/value pairs in `kvs`."""
    base = _as_hash_map(hm, "assoc")
    data = dict(base.data)
    data.update(_pairs(list(kvs)))
    return HashMap._owning(data)


def dissoc(hm: LispValue, kvs: PySequence[LispValue]) -> HashMap:
    """Return a new hash map without the keys named in `kvs`.

    `kvs` is validated exactly like assoc's key/value list: even length and a
    string/keyword at every even index. Each key at an even index is removed;
    the value paired with it is ignored. Absent keys are skipped.
    """
    base = _as_hash_map(hm, "dissoc")
    drop = {k for k, _ in _pairs(list(kvs))}
    return HashMap._owning({k: v for k, v in base.data.items() if k not in drop})
