"""Keywords are strings tagged with a reserved private marker character.

The marker must survive any serialization of values, otherwise keywords
silently turn into ordinary strings.
"""

from __future__ import annotations

from rill import LispValue
from rill.errors import RillTypeError

KEYWORD_PREFIX = "ʞ"


def is_keyword(value: LispValue) -> bool:
    return isinstance(value, str) and value.startswith(KEYWORD_PREFIX)


def keyword(value: LispValue) -> str:
    """Return `value` in keyword form; already-keyword strings are returned as is."""
    if not isinstance(value, str):
        raise RillTypeError(f"invalid type for keyword: {value!r}")
    if value.startswith(KEYWORD_PREFIX):
        return value
    return KEYWORD_PREFIX + value


def keyword_name(value: str) -> str:
    """Strip the marker, giving the name as written after ':' in source."""
    return value[len(KEYWORD_PREFIX):] if is_keyword(value) else value
