"""
Escape handlers for sqlescape.

Implements the replacement strategies invoked for each escape clause:
- Pass-through: echoes the keyword and/or its arguments
- Function: maps JDBC-style scalar function escapes onto SQLite functions

The standard registry, `HANDLER_MAP`, covers the keywords a SQLite driver
understands. Callers may supply their own handlers; anything implementing
`EscapeHandler.process` is accepted.
"""

import re
from types import MappingProxyType
from typing import Final, Iterable, Mapping, Protocol, Self, runtime_checkable


@runtime_checkable
class EscapeHandler(Protocol):
    """Protocol defining the handler interface for escape clauses.

    Handlers receive the clause keyword and its argument tail, with any
    nested clauses already resolved, and return the replacement text.
    """

    def process(self: Self, keyword: str, args: str) -> str:
        """Produce replacement text for a clause.

        Args:
            keyword: The clause keyword, as written
            args: The transformed, trimmed argument tail (may be empty)

        Returns:
            Text spliced into the output in place of the clause
        """
        ...


class PassthruEscapeHandler:
    """Handler that leaves the clause content as it is."""

    def __init__(self: Self, include_keyword: bool) -> None:
        self.include_keyword: bool = include_keyword

    def process(self: Self, keyword: str, args: str) -> str:
        if not self.include_keyword:
            return args
        if not args:
            return keyword
        return f"{keyword} {args}"

    def __repr__(self: Self) -> str:
        return f"PassthruEscapeHandler(include_keyword={self.include_keyword})"


class FunctionEscapeHandler:
    """Handler for ``{fn name(args)}`` scalar function escapes."""

    FUNC_PATTERN: Final[re.Pattern[str]] = re.compile(
        r"([a-zA-Z0-9_]+)\s*(\(.*\))?", re.DOTALL
    )

    SIMPLE_MAPPINGS: Final[Mapping[str, str]] = MappingProxyType(
        {
            "CHAR_LENGTH": "LENGTH",
            "OCTET_LENGTH": "LENGTH",
            "LCASE": "LOWER",
            "UCASE": "UPPER",
            "SUBSTRING": "SUBSTR",
        }
    )

    def process(self: Self, keyword: str, args: str) -> str:
        """Rewrite a function escape into SQLite syntax.

        Renamed functions keep their argument list, ``USER`` becomes an empty
        string literal and ``CONCAT`` becomes a chain of ``||`` operators.
        Unrecognised functions are returned unchanged.

        Args:
            keyword: Always ``fn`` in the standard registry
            args: Function call text, e.g. ``ucase(name)``

        Returns:
            SQLite expression
        """
        match: re.Match[str] | None = self.FUNC_PATTERN.fullmatch(args)
        if match is None:
            return args

        name: str = match.group(1).upper()
        call_args: str = match.group(2) or ""

        mapped: str | None = self.SIMPLE_MAPPINGS.get(name)
        if mapped is not None:
            return mapped + call_args
        if name == "USER":
            return "''"
        if name == "CONCAT" and call_args:
            from sqlescape.lib.parser.scanner import split  # avoid circular import

            return " || ".join(split(call_args[1:-1]))
        return args

    def __repr__(self: Self) -> str:
        return "FunctionEscapeHandler()"


_pair: Final[PassthruEscapeHandler] = PassthruEscapeHandler(True)
_arg: Final[PassthruEscapeHandler] = PassthruEscapeHandler(False)

HANDLER_MAP: Final[Mapping[str, EscapeHandler]] = MappingProxyType(
    {
        "limit": _pair,
        "escape": _pair,
        "fn": FunctionEscapeHandler(),
        "d": _arg,
        "t": _arg,
        "ts": _arg,
        "oj": _arg,
    }
)


def handlerMap_build(
    passthru: Iterable[str] = (),
    arg_only: Iterable[str] = (),
    defaults: bool = True,
    extra: Mapping[str, EscapeHandler] | None = None,
) -> dict[str, EscapeHandler]:
    """Assemble a handler map for a transform call.

    Later sources override earlier ones: the standard registry, then
    ``extra``, then ``passthru`` and finally ``arg_only`` keywords.

    Args:
        passthru: Keywords echoed together with their arguments
        arg_only: Keywords replaced by their arguments alone
        defaults: Start from `HANDLER_MAP`
        extra: Additional handlers, e.g. loaded from the handlers file

    Returns:
        A new, independent handler map
    """
    handlers: dict[str, EscapeHandler] = dict(HANDLER_MAP) if defaults else {}
    if extra:
        handlers.update(extra)
    for keyword in passthru:
        handlers[keyword] = PassthruEscapeHandler(True)
    for keyword in arg_only:
        handlers[keyword] = PassthruEscapeHandler(False)
    return handlers
