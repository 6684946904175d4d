r"""
Escape clause scanner.

Rewrites ``{keyword args...}`` escape clauses embedded in query text by
dispatching each clause to the handler registered for its keyword, and
splits text into top-level comma separated fields.

The scanner handles:
- Four lexical modes: plain text, single quoted, double quoted and bracket
  quoted text. Quoted text is copied verbatim and never parsed for clauses.
- Nested clauses, resolved inside-out; siblings resolve left to right.
  Open clauses are kept on an explicit stack, so nesting depth is not
  limited by the interpreter recursion limit.
- Strict error reporting: any malformation aborts the whole transform.

Example:
    transform("SELECT * FROM t {limit 10}", {"limit": PassthruEscapeHandler(True)})
    -> "SELECT * FROM t limit 10"
"""

from dataclasses import dataclass, field
from typing import Mapping
from sqlescape.lib.log import LOG
from sqlescape.lib.parser.errors import EscapeSyntaxError
from sqlescape.lib.parser.handlers import EscapeHandler
from sqlescape.models.dataModel import LexicalMode, SyntaxErrorKind


def split(text: str) -> list[str]:
    """Split text into its top-level comma separated fields.

    Commas nested inside parentheses or quoted text do not delimit. Fields
    are trimmed; an empty first or last field is dropped while empty fields
    between two delimiters are kept. Unterminated quotes or parentheses are
    implicitly closed by the end of the text.

    Args:
        text: Text to split, e.g. the argument list of a function call

    Returns:
        Ordered list of trimmed fields
    """
    fields: list[str] = []
    mode: LexicalMode = LexicalMode.PLAIN
    depth: int = 0
    start: int = 0

    for lpc, ch in enumerate(text):
        if mode is not LexicalMode.PLAIN:
            if ch == mode.closer:
                mode = LexicalMode.PLAIN
            continue

        opened: LexicalMode | None = LexicalMode.for_opener(ch)
        if opened is not None:
            mode = opened
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch == "," and depth == 0:
            fields.append(text[start:lpc].strip())
            start = lpc + 1

    fields.append(text[start:].strip())
    if not fields[-1]:
        fields.pop()
    if fields and not fields[0]:
        fields.pop(0)
    return fields


@dataclass
class ClauseFrame:
    """An escape clause whose closing brace has not been reached yet.

    Attributes:
        brace: Index of the opening brace, -1 for the top level
        keyword: Clause keyword, empty for the top level
        parts: Rewritten text collected so far
    """

    brace: int
    keyword: str = ""
    parts: list[str] = field(default_factory=list)


def transform(text: str, handlers: Mapping[str, EscapeHandler]) -> str:
    """Replace every escape clause in text with its handler's output.

    Args:
        text: Escaped query text
        handlers: Keyword to handler lookup; never modified

    Returns:
        The rewritten text

    Raises:
        EscapeSyntaxError: If the text is malformed or names an unknown keyword
    """
    stack: list[ClauseFrame] = [ClauseFrame(brace=-1)]
    lpc: int = 0
    length: int = len(text)

    while lpc < length:
        ch: str = text[lpc]
        quoted: LexicalMode | None = LexicalMode.for_opener(ch)

        if quoted is not None:
            end: int = text.find(quoted.closer, lpc + 1)
            if end < 0:
                raise EscapeSyntaxError(SyntaxErrorKind.UNTERMINATED_QUOTE, text, lpc)
            stack[-1].parts.append(text[lpc : end + 1])
            lpc = end + 1
        elif ch == "{":
            frame: ClauseFrame = _clause_open(text, lpc)
            stack.append(frame)
            lpc += len(frame.keyword) + 1
        elif ch == "}":
            if len(stack) == 1:
                raise EscapeSyntaxError(SyntaxErrorKind.UNOPENED_ESCAPE, text, lpc)
            closed: ClauseFrame = stack.pop()
            stack[-1].parts.append(
                _clause_resolve(text, handlers, closed, len(stack) - 1)
            )
            lpc += 1
        else:
            stack[-1].parts.append(ch)
            lpc += 1

    if len(stack) > 1:
        opened: int = stack[1].brace
        raise EscapeSyntaxError(SyntaxErrorKind.UNTERMINATED_ESCAPE, text, opened)
    return "".join(stack[0].parts)


def _clause_open(text: str, brace: int) -> ClauseFrame:
    """Read the keyword of the clause opened at ``brace``."""
    length: int = len(text)
    keyword_end: int = brace + 1
    while (
        keyword_end < length
        and not text[keyword_end].isspace()
        and text[keyword_end] != "}"
    ):
        keyword_end += 1

    keyword: str = text[brace + 1 : keyword_end]
    if not keyword:
        if keyword_end >= length:
            raise EscapeSyntaxError(SyntaxErrorKind.UNTERMINATED_ESCAPE, text, brace)
        raise EscapeSyntaxError(SyntaxErrorKind.MISSING_KEYWORD, text, brace)
    return ClauseFrame(brace=brace, keyword=keyword)


def _clause_resolve(
    text: str, handlers: Mapping[str, EscapeHandler], frame: ClauseFrame, depth: int
) -> str:
    """Dispatch a closed clause to its handler.

    Returns:
        The handler's replacement text
    """
    handler: EscapeHandler | None = handlers.get(frame.keyword)
    if handler is None:
        raise EscapeSyntaxError(SyntaxErrorKind.UNKNOWN_KEYWORD, text, frame.brace + 1)

    replacement: str = handler.process(frame.keyword, "".join(frame.parts).strip())
    LOG(f"Escape '{frame.keyword}' at {frame.brace} (depth {depth}) -> {replacement!r}")
    return replacement
