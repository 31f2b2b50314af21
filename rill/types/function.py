"""Callable values: built-in functions and user closures.

Neither kind compares equal to anything, itself included; function
identity is deliberately left undefined.
"""

from __future__ import annotations

from rill import LispValue, EvaluatorFn, BuiltinFn
from rill.types.environment import Environment
from rill.types.nil import Nil


class Func:
    """A built-in function: a Python callable from an argument list to a value."""

    __slots__ = ("fn", "name", "meta")

    def __init__(self, fn: BuiltinFn, name: str | None = None, meta: LispValue = Nil):
        self.fn: BuiltinFn = fn
        self.name: str = name or getattr(fn, "__name__", "anonymous")
        self.meta: LispValue = meta

    def with_meta(self, meta: LispValue) -> Func:
        return Func(self.fn, self.name, meta)

    def apply(self, args: list[LispValue]) -> LispValue:
        from rill.evaluation.apply import apply
        return apply(self, args)

    def __eq__(self, other) -> bool:
        return False

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


class Closure:
    """A user function capturing its defining environment by reference."""

    __slots__ = ("params", "body", "env", "eval_fn", "is_macro", "meta")

    def __init__(
        self,
        params: LispValue,
        body: LispValue,
        env: Environment,
        eval_fn: EvaluatorFn,
        is_macro: bool = False,
        meta: LispValue = Nil,
    ):
        self.params: LispValue = params
        self.body: LispValue = body
        self.env: Environment = env
        # Host evaluator, called as eval_fn(body, env)
        self.eval_fn: EvaluatorFn = eval_fn
        self.is_macro: bool = is_macro
        self.meta: LispValue = meta

    def _copy(self, is_macro: bool, meta: LispValue) -> Closure:
        return Closure(self.params, self.body, self.env, self.eval_fn, is_macro, meta)

    def with_meta(self, meta: LispValue) -> Closure:
        return self._copy(self.is_macro, meta)

    def as_macro(self) -> Closure:
        return self._copy(True, self.meta)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind `args` to this closure's parameters in a fresh scope whose outer
        is the captured environment. Evaluation of the body is left to the
        caller, so a trampolining evaluator can loop instead of recursing.
        """
        from rill.types.bind import bind_arguments
        return bind_arguments(self.env, self.params, list(args))

    def apply(self, args: list[LispValue]) -> LispValue:
        from rill.evaluation.apply import apply
        return apply(self, args)

    def __eq__(self, other) -> bool:
        return False

    __hash__ = object.__hash__

    def __str__(self) -> str:
        head = "macro*" if self.is_macro else "fn*"
        return f"({head} {self.params} {self.body})"

    def __repr__(self) -> str:
        return str(self)
