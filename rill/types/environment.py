"""Runtime environment for Rill.

An Environment maps Symbols to evaluated Lisp values and links to an optional
`outer` scope, forming the chain used for lexical lookup and closure capture.
Closures hold their defining Environment by reference, never by copy.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from rill import LispValue
from rill.errors import RillTypeError, RillUnboundSymbol
from rill.types.keyword import is_keyword
from rill.types.symbol import Symbol


def _as_symbol(name: Symbol | str) -> Symbol:
    if isinstance(name, Symbol):
        return name
    if isinstance(name, str) and not is_keyword(name):
        return Symbol(name)
    raise RillTypeError(f"Cannot bind {name!r}: not a symbol")


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def find(self, name: Symbol | str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        symbol = _as_symbol(name)
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol | str) -> LispValue:
        """Look up the value bound to `name`.

        Raises RillUnboundSymbol if no scope in the chain binds it.
        """
        symbol = _as_symbol(name)
        env = self.find(symbol)
        if env is None:
            raise RillUnboundSymbol(symbol)
        return env.vars[symbol]

    def set(self, name: Symbol | str, value: LispValue) -> LispValue:
        """Bind `name` in this scope only, shadowing any outer binding."""
        self.vars[_as_symbol(name)] = value
        return value

    def update(self, mapping: dict[Symbol | str, LispValue]) -> None:
        """Bulk-bind a mapping of names to values in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                with StringIO() as env_buf:
                    env._write_vars(env_buf)
                    chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
