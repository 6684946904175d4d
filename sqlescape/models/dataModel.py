"""
dataModel.py

This module defines the data models and enumerations used throughout the
sqlescape package. The result and configuration models leverage Pydantic for
validation and type safety.

Features:
- Lexical modes tracked by the escape scanner and the field splitter.
- The taxonomy of escape syntax errors.
- Parsing results returned by the non-raising parser facade.
- Handler specifications read from the user configuration file.

Usage:
Import these models to validate and structure data used in the application.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class LexicalMode(Enum):
    """
    Enum for the lexical state of a scan.

    Each quoted mode carries its opening and closing delimiter. While a quoted
    mode is active, braces, commas and parentheses are literal text.
    """

    PLAIN = ("", "")
    IN_SINGLE_QUOTE = ("'", "'")
    IN_DOUBLE_QUOTE = ('"', '"')
    IN_BRACKET_QUOTE = ("[", "]")

    @property
    def opener(self) -> str:
        return self.value[0]

    @property
    def closer(self) -> str:
        return self.value[1]

    @classmethod
    def for_opener(cls, ch: str) -> "LexicalMode | None":
        """Return the quoted mode opened by ``ch``, if any."""
        for mode in cls:
            if mode is not cls.PLAIN and mode.opener == ch:
                return mode
        return None


class SyntaxErrorKind(Enum):
    """
    Enum for the categories of malformed escaped text.
    """

    UNTERMINATED_QUOTE = "Unterminated quoted text"
    UNTERMINATED_ESCAPE = "Unterminated escape sequence"
    UNOPENED_ESCAPE = "Extraneous closing brace"
    MISSING_KEYWORD = "A keyword must immediately follow the start of an escape sequence"
    UNKNOWN_KEYWORD = "Unknown escape keyword"


class ParseResult(BaseModel):
    """Result of an escape transform operation.

    Attributes:
        text: The processed text after substitutions
        error: Optional error message if parsing failed
        success: Whether parsing succeeded
    """

    text: str
    error: str | None
    success: bool


class HandlerSpec(BaseModel):
    """
    Model for a pass-through keyword declared in the handlers file.

    Attributes:
        include_keyword (bool): Echo the keyword in front of its arguments.
    """

    model_config = ConfigDict(extra="forbid")

    include_keyword: bool = Field(
        default=True, description="Emit 'keyword args' rather than 'args' alone."
    )
