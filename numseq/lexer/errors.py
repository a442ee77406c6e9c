"""
Error reporting shared by every numseq stage.

Provides the diagnostic record and the base exception that the parser
and analyzer errors build on.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single error report with its location in the spec."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"
        if self.help_text:
            result += f"  help: {self.help_text}\n"
        return result


class NumSeqError(Exception):
    """
    Base exception for a rejected number sequence specification.

    Every error aborts the whole parse; there are no partial results.
    """

    kind = "error"

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return self.message

