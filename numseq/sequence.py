"""
The parsed sequence descriptor and the strict entry point that builds it.

Author: xwest
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .analyzer.classifier import SequenceKind, classify
from .config import OptionsLike, resolve_options
from .lexer.lexer import Lexer
from .lexer.tokens import Number
from .parser.ast_nodes import SequenceSpec
from .parser.parser import Parser


@dataclass(frozen=True)
class ParsedSequence:
    """
    Immutable description of a number sequence.

    Attributes:
        numbers: The explicit numbers, in order (at least one)
        has_ellipsis: Whether the sequence continues past the numbers
        last_bound: Optional bound after the ellipsis, may be +/-inf
        kind: ARITHMETIC, GEOMETRIC or ITEMIZED (no ellipsis)
        step: Common difference or ratio; None for ITEMIZED
    """
    numbers: Tuple[Number, ...]
    has_ellipsis: bool
    kind: SequenceKind
    last_bound: Optional[Number] = None
    step: Optional[Number] = None

    def __post_init__(self):
        if not self.numbers:
            raise ValueError("a sequence needs at least one number")
        if (self.kind == SequenceKind.ITEMIZED) == self.has_ellipsis:
            raise ValueError(f"{self.kind.value} sequence with has_ellipsis={self.has_ellipsis}")
        if self.last_bound is not None and not self.has_ellipsis:
            raise ValueError("a bound requires an ellipsis")
        if (self.step is None) == self.has_ellipsis:
            raise ValueError("step must be set exactly when the sequence has an ellipsis")

    @property
    def is_infinite(self) -> bool:
        """True when values keep coming for as long as the caller pulls."""
        return self.has_ellipsis and self.last_bound is None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the field names used by the enveloped API."""
        result: Dict[str, Any] = {
            "numbers": list(self.numbers),
            "has_ellipsis": self.has_ellipsis,
        }
        if self.has_ellipsis:
            result["last_number"] = self.last_bound
        result["type"] = self.kind.value
        result["inc"] = self.step
        return result


def build_sequence(spec: SequenceSpec) -> ParsedSequence:
    """
    Assemble a ParsedSequence from parser output, classifying it if needed.

    Raises:
        ClassificationError: If an ellipsis follows numbers without a pattern
    """
    if not spec.has_ellipsis:
        return ParsedSequence(numbers=spec.numbers, has_ellipsis=False,
                              kind=SequenceKind.ITEMIZED)

    classification = classify(spec.numbers, spec.ellipsis_location)
    return ParsedSequence(
        numbers=spec.numbers,
        has_ellipsis=True,
        kind=classification.kind,
        last_bound=spec.last_bound,
        step=classification.step,
    )


def parse_sequence(spec: str, options: OptionsLike = None) -> ParsedSequence:
    """
    Parse a spec string into a ParsedSequence.

    This is the strict entry point: errors propagate to the caller.

    Raises:
        ParseError: If the spec is malformed
        ClassificationError: If the pattern can't be determined
    """
    resolve_options(options)
    tokens = Lexer(spec).tokenize()
    return build_sequence(Parser(tokens).parse())
