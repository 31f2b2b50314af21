from __future__ import annotations

from typing import Any


class RillError(Exception):
    """ Base class for all Rill errors"""
    pass

class RillSyntaxError(RillError):
    """ Raised when the reader cannot parse its input"""

class RillEmptyInput(RillSyntaxError):
    """ Raised when the reader is given no tokens at all"""

class RillTypeError(RillError):
    """ Raised when an operation receives a value of the wrong type"""

class RillArityError(RillError):
    """ Raised when the number of arguments or key/value items is incorrect"""

class RillUnboundSymbol(RillError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, symbol: Any):
        super().__init__(f"'{symbol}' not found")
        self.symbol = symbol


class RillThrow(RillError):
    """Value-carrying error, lets an evaluator raise and catch arbitrary values."""

    def __init__(self, value: Any):
        super().__init__(f"RillThrow(value={value!r})")
        self.value: Any = value
