from __future__ import annotations

from typing import Callable, TYPE_CHECKING

from rill import SExpression
from rill.errors import RillSyntaxError
from rill.types.sequence import List
from rill.types.symbol import Symbol

if TYPE_CHECKING:
    from rill.reader.parser import TokenStream

MacroHandler = Callable[["TokenStream"], SExpression]


class ReaderMacros:
    """
    Registry of reader macros.
    Maps a prefix token (like ', `, ^) to a handler that reads the following
    form(s) from the stream and returns the equivalent tagged List.
    """

    def __init__(self):
        self.macros: dict[str, MacroHandler] = {}

    def define(self, token: str, handler: MacroHandler) -> None:
        """Register a reader macro for a given prefix token."""
        self.macros[token] = handler

    def is_macro(self, token: str) -> bool:
        return token in self.macros

    def dispatch(self, token: str, stream: TokenStream) -> SExpression:
        """Invoke the reader macro; the prefix token is already consumed."""
        if token not in self.macros:
            raise RillSyntaxError(f"No reader macro defined for {token!r}")
        return self.macros[token](stream)


def _wrap(tag: Symbol) -> MacroHandler:
    def handler(stream: TokenStream) -> SExpression:
        return List((tag, stream.read_form()))
    return handler


def _with_meta(stream: TokenStream) -> SExpression:
    # ^meta target => (with-meta target meta); the metadata is written first
    meta = stream.read_form()
    target = stream.read_form()
    return List((Symbol("with-meta"), target, meta))


# -------------------------
# Single global instance
# -------------------------
reader_macros: ReaderMacros = ReaderMacros()

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

# Quote forms: ', `, ~, ~@ and deref @
for key, name in QUOTE_FORMS.items():
    reader_macros.define(key, _wrap(name))

reader_macros.define("^", _with_meta)
