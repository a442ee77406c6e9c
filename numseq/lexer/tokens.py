"""
Token definitions for the numseq lexer.

A number sequence specification only needs a handful of token types:
- Numeric literals (integers and decimals, optionally signed)
- Separators (a comma together with any whitespace around it)
- The ellipsis marker
- Signed infinity, which is only meaningful as a bound
- Invalid input and end of input

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any, Union


Number = Union[int, float]


class TokenType(Enum):
    """
    Enumeration of all token types in a number sequence specification.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42, -7, +1.25
    INFINITY = auto()               # Inf, +Inf, -Inf

    # ========================================================================
    # Punctuation
    # ========================================================================
    COMMA = auto()                  # , (with surrounding whitespace)
    ELLIPSIS = auto()               # ...

    # ========================================================================
    # Error and Recovery Tokens
    # ========================================================================
    INVALID = auto()                # Unrecognized remainder of the input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location inside a specification string.

    Used for error reporting.
    """
    source: str
    column: int
    offset: int  # Character offset from start of the spec

    def __str__(self) -> str:
        return f"{self.source!r}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.source!r}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in a number sequence specification.

    Contains the token type, lexeme (raw text), semantic value
    and source location.
    """
    type: TokenType
    lexeme: str                     # Raw text from the spec
    value: Any                      # int/float for NUMBER and INFINITY
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None and str(self.value) != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a numeric value."""
        return self.type in LITERAL_TYPES


LITERAL_TYPES = {TokenType.NUMBER, TokenType.INFINITY}

# Fixed lexemes
ELLIPSIS = "..."
INFINITY_WORD = "Inf"
