"""
Error handling for the numseq parser.

Every malformed spec is reported as a ParseError carrying a diagnostic
that points at the offending token.

Author: xwest
"""

from typing import Optional

from ..lexer.tokens import Token, SourceLocation
from ..lexer.errors import NumSeqError


GRAMMAR_HELP = "please only use 'a,b,c', 'a,b,c,...' or 'a,b,c,...,z'"


class ParseError(NumSeqError):
    """
    Exception raised when a spec does not follow the sequence grammar.

    This is the syntax error kind: leading comma, no numbers, too few
    numbers before the ellipsis, or trailing text.
    """

    kind = "syntax"

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message, location, code=code, help_text=help_text)
        self.token = token


# Common error codes for categorization
ERROR_CODES = {
    "P001": "Leading comma",
    "P002": "No numbers",
    "P003": "Too few numbers before ellipsis",
    "P004": "Extraneous token",
}


def create_leading_comma_error(token: Token) -> ParseError:
    """Create an error for a spec that starts with a separator."""
    return ParseError(
        message="Number sequence must not start with comma",
        location=token.location,
        token=token,
        code="P001",
        help_text="Remove the leading comma",
    )


def create_no_numbers_error(token: Token) -> ParseError:
    """Create an error for a spec without any number."""
    return ParseError(
        message=f"Sequence must specify one or more numbers in number sequence: {token.location.source!r}",
        location=token.location,
        token=token,
        code="P002",
        help_text=GRAMMAR_HELP,
    )


def create_short_prefix_error(token: Token, count: int) -> ParseError:
    """Create an error for an ellipsis that follows fewer than three numbers."""
    return ParseError(
        message=f"Invalid ellipsis: need at least three numbers before ellipsis, got {count}",
        location=token.location,
        token=token,
        code="P003",
        help_text="Add more numbers so the pattern can be determined",
    )


def create_extraneous_token_error(token: Token) -> ParseError:
    """Create an error for text left over after the grammar was consumed."""
    remainder = token.location.source[token.location.offset:]
    return ParseError(
        message=f"Found extraneous token in number sequence: {remainder!r}, {GRAMMAR_HELP}",
        location=token.location,
        token=token,
        code="P004",
        help_text=GRAMMAR_HELP,
    )
