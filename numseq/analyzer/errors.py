"""
Classification error handling for numseq.

Author: xwest
"""

from typing import Optional, Sequence

from ..lexer.tokens import Number, SourceLocation
from ..lexer.errors import NumSeqError


class ClassificationError(NumSeqError):
    """
    Exception raised when the numbers before an ellipsis follow neither a
    constant difference nor a constant ratio.
    """

    kind = "classification"

    def __init__(
        self,
        message: str,
        numbers: Sequence[Number],
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message, location, code=code, help_text=help_text)
        self.numbers = tuple(numbers)


def format_numbers(numbers: Sequence[Number]) -> str:
    return ", ".join(str(n) for n in numbers)


def create_unclassifiable_error(numbers: Sequence[Number],
                                location: Optional[SourceLocation] = None) -> ClassificationError:
    """Create an error for numbers without an arithmetic or geometric pattern."""
    return ClassificationError(
        message=f"Can't classify number sequence: cannot determine pattern from: {format_numbers(numbers)}",
        numbers=numbers,
        location=location,
        code="C001",
        help_text="Only arithmetic (constant difference) and geometric (constant ratio) sequences are recognized",
    )
