"""
Parser package for escape clause substitution.

Provides a scanner for ``{keyword args}`` escape clauses, the handler
interface it dispatches to and the standard handler registry.
"""

from .errors import EscapeSyntaxError
from .handlers import (
    HANDLER_MAP,
    EscapeHandler,
    FunctionEscapeHandler,
    PassthruEscapeHandler,
    handlerMap_build,
)
from .scanner import split, transform
from .base import EscapeParser, native_sql

__all__ = [
    "EscapeSyntaxError",
    "EscapeHandler",
    "PassthruEscapeHandler",
    "FunctionEscapeHandler",
    "HANDLER_MAP",
    "handlerMap_build",
    "split",
    "transform",
    "EscapeParser",
    "native_sql",
]
