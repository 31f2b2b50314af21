"""Application engine for Rill.

Single entry point for calling a function value:
- Func: the wrapped Python callable receives the argument list.
- Closure: arguments are bound into a fresh scope whose outer is the captured
  environment, then the body is handed to the closure's evaluator.

Evaluators should route every ordinary call through `apply` so built-ins and
closures follow one protocol.
"""

from __future__ import annotations

import logging
from typing import Iterable

from rill import LispValue
from rill.errors import RillTypeError
from rill.types.function import Func, Closure

logger = logging.getLogger(__name__)


def apply(fn: LispValue, args: Iterable[LispValue]) -> LispValue:
    """Apply either a built-in Func or a Closure; anything else is a type error."""
    args = list(args)
    if isinstance(fn, Func):
        return fn.fn(args)
    if isinstance(fn, Closure):
        env = fn.extend_env(args)
        logger.debug(f"applying closure {fn.params} to {len(args)} args")
        return fn.eval_fn(fn.body, env)
    raise RillTypeError(f"attempt to call non-function {fn!r}")
