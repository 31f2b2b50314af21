from __future__ import annotations

import logging
from typing import List as PyList

from rill import LispValue
from rill.config import resolve, strict_arity
from rill.errors import RillArityError, RillTypeError
from rill.types.environment import Environment
from rill.types.sequence import List, Sequence
from rill.types.symbol import REST_MARKER

logger = logging.getLogger(__name__)


def bind_arguments(
    outer: Environment | None,
    params: LispValue,
    args: PyList[LispValue],
    strict: bool | None = None,
) -> Environment:
    """
    Create a scope linked to `outer` and bind `params` against `args`.

    `params` is a List or Vector of Symbols, positionally matched with `args`.
    The marker `&` binds the following symbol to the remaining arguments as a
    List and ends binding, so `(a & b)` against `(1 2 3)` gives a=1, b=(2 3).

    Too few arguments raises RillArityError. Surplus arguments for a parameter
    list without `&` are ignored unless strict arity is on (argument or the
    RILL_STRICT_ARITY environment variable).
    """
    if not isinstance(params, Sequence):
        raise RillTypeError(f"binding target is not a List/Vector: {params!r}")

    formals = params.items
    env = Environment(outer)
    for i, formal in enumerate(formals):
        if formal == REST_MARKER:
            if i + 1 >= len(formals):
                raise RillArityError("Malformed parameter list: & must be followed by a name")
            env.set(formals[i + 1], List(args[i:]))
            logger.debug(f"bound {len(formals) - 1} params, {len(args) - i} rest args")
            return env
        if i >= len(args):
            missing = [str(s) for s in formals[i:] if s != REST_MARKER]
            raise RillArityError(
                f"Too few arguments; missing {len(missing)} parameter(s): {missing}"
            )
        env.set(formal, args[i])

    if len(args) > len(formals) and resolve(strict, strict_arity):
        raise RillArityError(f"Too many arguments: {list(args[len(formals):])}")
    logger.debug(f"bound {len(formals)} params")
    return env
