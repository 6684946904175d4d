"""
Exceptions raised by the escape scanner.
"""

from typing import Final, Self
from sqlescape.models.dataModel import SyntaxErrorKind

FRAGMENT_MAX: Final[int] = 40


class EscapeSyntaxError(ValueError):
    """Malformed escaped text.

    Every malformation is reported through this single type; ``kind``
    distinguishes the category.

    Attributes:
        kind: Category of the malformation
        position: Index into the scanned text where it was detected
        fragment: Offending remainder of the text, truncated
    """

    def __init__(self: Self, kind: SyntaxErrorKind, text: str, position: int) -> None:
        fragment: str = text[position : position + FRAGMENT_MAX]
        if len(text) - position > FRAGMENT_MAX:
            fragment += "..."
        self.kind: SyntaxErrorKind = kind
        self.position: int = position
        self.fragment: str = fragment
        super().__init__(f"{kind.value} -- {fragment}")
