"""Core operations of the value model exposed as built-in functions.

`register(env)` installs them into a root environment. Every function takes
the evaluated argument list and returns a value or raises a RillError.
"""
from __future__ import annotations

from rill import LispValue
from rill.errors import RillArityError, RillThrow, RillTypeError
from rill.evaluation.apply import apply as apply_engine
from rill.types.atom import Atom
from rill.types.environment import Environment
from rill.types.equality import equals
from rill.types.function import Func
from rill.types.hash_map import HashMap, assoc, dissoc, hash_map
from rill.types.keyword import is_keyword, keyword
from rill.types.nil import Nil
from rill.types.sequence import List, Sequence, Vector
from rill.types.value import count, get_meta, is_empty, with_meta


def _expect(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise RillArityError(f"{name} requires exactly {n} argument(s), got {len(args)}")


def _at_least(name: str, args: list[LispValue], n: int) -> None:
    if len(args) < n:
        raise RillArityError(f"{name} requires at least {n} argument(s), got {len(args)}")


def _atom(name: str, value: LispValue) -> Atom:
    if not isinstance(value, Atom):
        raise RillTypeError(f"{name} expects an atom, got {value!r}")
    return value


def _hash(name: str, value: LispValue) -> HashMap:
    if not isinstance(value, HashMap):
        raise RillTypeError(f"{name} expects a hash-map, got {value!r}")
    return value


# -------------------------------
# Equality and sequences
# -------------------------------
def equals_fn(args: list[LispValue]) -> bool:
    """True if all arguments are equal (vacuously for zero/one arg)."""
    return all(equals(a, b) for a, b in zip(args, args[1:]))


def count_fn(args: list[LispValue]) -> int:
    _expect("count", args, 1)
    return count(args[0])


def empty_fn(args: list[LispValue]) -> bool:
    _expect("empty?", args, 1)
    return is_empty(args[0])


def list_fn(args: list[LispValue]) -> List:
    return List(args)


def vector_fn(args: list[LispValue]) -> Vector:
    return Vector(args)


# -------------------------------
# Keywords
# -------------------------------
def keyword_fn(args: list[LispValue]) -> str:
    _expect("keyword", args, 1)
    return keyword(args[0])


def keyword_p(args: list[LispValue]) -> bool:
    _expect("keyword?", args, 1)
    return is_keyword(args[0])


# -------------------------------
# Hash maps
# -------------------------------
def hash_map_fn(args: list[LispValue]) -> HashMap:
    return hash_map(args)


def assoc_fn(args: list[LispValue]) -> HashMap:
    _at_least("assoc", args, 1)
    return assoc(args[0], args[1:])


def dissoc_fn(args: list[LispValue]) -> HashMap:
    _at_least("dissoc", args, 1)
    return dissoc(args[0], args[1:])


def get_fn(args: list[LispValue]) -> LispValue:
    """(get m k) => value for k, or nil when missing or m is nil."""
    _expect("get", args, 2)
    if args[0] is Nil:
        return Nil
    hm = _hash("get", args[0])
    return hm.get(args[1]) if isinstance(args[1], str) else Nil


def contains_fn(args: list[LispValue]) -> bool:
    _expect("contains?", args, 2)
    hm = _hash("contains?", args[0])
    return isinstance(args[1], str) and args[1] in hm


def keys_fn(args: list[LispValue]) -> List:
    _expect("keys", args, 1)
    return List(_hash("keys", args[0]).keys())


def vals_fn(args: list[LispValue]) -> List:
    _expect("vals", args, 1)
    return List(_hash("vals", args[0]).values())


# -------------------------------
# Atoms
# -------------------------------
def atom_fn(args: list[LispValue]) -> Atom:
    _expect("atom", args, 1)
    return Atom(args[0])


def atom_p(args: list[LispValue]) -> bool:
    _expect("atom?", args, 1)
    return isinstance(args[0], Atom)


def deref_fn(args: list[LispValue]) -> LispValue:
    _expect("deref", args, 1)
    return _atom("deref", args[0]).deref()


def reset_fn(args: list[LispValue]) -> LispValue:
    _expect("reset!", args, 2)
    return _atom("reset!", args[0]).reset(args[1])


def swap_fn(args: list[LispValue]) -> LispValue:
    """(swap! a f x ...) => stores (f @a x ...) in a and returns it."""
    _at_least("swap!", args, 2)
    return _atom("swap!", args[0]).swap(args[1], *args[2:])


# -------------------------------
# Metadata, errors, application
# -------------------------------
def meta_fn(args: list[LispValue]) -> LispValue:
    _expect("meta", args, 1)
    return get_meta(args[0])


def with_meta_fn(args: list[LispValue]) -> LispValue:
    _expect("with-meta", args, 2)
    return with_meta(args[0], args[1])


def throw_fn(args: list[LispValue]) -> LispValue:
    _expect("throw", args, 1)
    raise RillThrow(args[0])


def apply_fn(args: list[LispValue]) -> LispValue:
    """(apply f a b '(c d)) => (f a b c d); the last argument must be a sequence."""
    _at_least("apply", args, 2)
    fn, *leading, tail = args
    if not isinstance(tail, Sequence):
        raise RillTypeError(f"apply expects a list or vector last, got {tail!r}")
    return apply_engine(fn, [*leading, *tail.items])


CORE_BUILTINS = {
    "=": equals_fn,
    "count": count_fn,
    "empty?": empty_fn,
    "list": list_fn,
    "vector": vector_fn,
    "keyword": keyword_fn,
    "keyword?": keyword_p,
    "hash-map": hash_map_fn,
    "assoc": assoc_fn,
    "dissoc": dissoc_fn,
    "get": get_fn,
    "contains?": contains_fn,
    "keys": keys_fn,
    "vals": vals_fn,
    "atom": atom_fn,
    "atom?": atom_p,
    "deref": deref_fn,
    "reset!": reset_fn,
    "swap!": swap_fn,
    "meta": meta_fn,
    "with-meta": with_meta_fn,
    "throw": throw_fn,
    "apply": apply_fn,
}


def register(env: Environment) -> Environment:
    """Install the core built-ins into `env` (normally the root scope)."""
    for name, fn in CORE_BUILTINS.items():
        env.set(name, Func(fn, name))
    return env


def root_env() -> Environment:
    """A fresh root scope holding only the core built-ins."""
    return register(Environment())
