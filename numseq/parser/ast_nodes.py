"""
Syntax node produced by the numseq parser.

Author: xwest
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..lexer.tokens import Number, SourceLocation


@dataclass(frozen=True)
class SequenceSpec:
    """
    The grammatical content of a spec, before its pattern is classified.

    `last_bound` is only set when the spec has an ellipsis followed by a
    bound; infinite bounds are stored as float infinities.
    """
    source: str
    numbers: Tuple[Number, ...]
    has_ellipsis: bool = False
    last_bound: Optional[Number] = None
    ellipsis_location: Optional[SourceLocation] = None

    @property
    def has_bound(self) -> bool:
        return self.last_bound is not None
