r"""
Parser facade for escaped query text.

Wraps the strict scanner in the result-object style used by the CLI: syntax
errors are logged and reported through a `ParseResult` instead of raised.

The facade handles:
- Escape clause substitution with a caller-supplied handler map
- Top-level field splitting
- The driver's native-SQL rewrite using the standard registry

Example:
    parser = EscapeParser(handlerMap_build(passthru=["top"]))
    result = parser.parse("SELECT {top 5} * FROM t")
"""

from typing import Mapping, Self
from sqlescape.lib.log import LOG
from sqlescape.lib.parser.errors import EscapeSyntaxError
from sqlescape.lib.parser.handlers import HANDLER_MAP, EscapeHandler
from sqlescape.lib.parser.scanner import split, transform
from sqlescape.models.dataModel import ParseResult


class EscapeParser:
    """Escape clause parser bound to a handler map.

    Attributes:
        handlers: Keyword to handler lookup used for every parse
    """

    def __init__(self: Self, handlers: Mapping[str, EscapeHandler] = HANDLER_MAP) -> None:
        """Initialize parser with its handler map.

        Args:
            handlers: Keyword to handler lookup

        Raises:
            TypeError: If a value does not implement `EscapeHandler`
        """
        for keyword, handler in handlers.items():
            if not isinstance(handler, EscapeHandler):
                raise TypeError(f"Handler for '{keyword}' has no process() method")
        self.handlers: Mapping[str, EscapeHandler] = handlers

    def parse(self: Self, input_text: str) -> ParseResult:
        """Rewrite all escape clauses in the input.

        Args:
            input_text: Raw escaped text

        Returns:
            ParseResult with processed text or error details
        """
        if not input_text:
            return ParseResult(text="", error=None, success=True)

        try:
            text: str = transform(input_text, self.handlers)
        except EscapeSyntaxError as e:
            LOG(f"Error in parse: {e}")
            return ParseResult(text="", error=str(e), success=False)
        return ParseResult(text=text, error=None, success=True)

    def split(self: Self, input_text: str) -> list[str]:
        return split(input_text)


def native_sql(sql: str) -> str:
    """Translate escaped SQL into the SQLite dialect.

    Raises:
        EscapeSyntaxError: If the SQL is malformed
    """
    return transform(sql, HANDLER_MAP)
