from __future__ import annotations
import os

_TRUE = {'1', 'true', 'yes', 'on'}


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE


def strict_read() -> bool:
    # Reject tokens left over after the first form in read_str
    return flag_from_env('RILL_STRICT_READ')


def strict_arity() -> bool:
    # Reject surplus arguments when binding a non-variadic parameter list
    return flag_from_env('RILL_STRICT_ARITY')


def resolve(explicit: bool | None, from_env) -> bool:
    """An explicit keyword argument wins over the environment setting."""
    return from_env() if explicit is None else explicit
