"""
Pattern classifier for number sequences with an ellipsis.

Arithmetic is tried before geometric, so a run of equal non-zero numbers
(which is both) is reported as arithmetic with a step of 0.

Comparisons are exact. A decimal sequence whose float differences don't
come out identical (e.g. 0.1, 0.2, 0.3) is not classified.

Author: xwest
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from ..lexer.tokens import Number, SourceLocation
from .errors import create_unclassifiable_error

logger = logging.getLogger(__name__)


class SequenceKind(Enum):
    """Shape of a parsed sequence; values are the serialized names."""
    ARITHMETIC = "arithmetic"
    GEOMETRIC = "geometric"
    ITEMIZED = "itemized"


@dataclass(frozen=True)
class Classification:
    """Result of classifying the explicit numbers of a sequence."""
    kind: SequenceKind
    step: Number


def common_difference(numbers: Sequence[Number]) -> Optional[Number]:
    """Return the constant difference between consecutive numbers, or None."""
    difference = numbers[1] - numbers[0]
    for previous, current in zip(numbers[1:], numbers[2:]):
        if current - previous != difference:
            return None
    return difference


def common_ratio(numbers: Sequence[Number]) -> Optional[Number]:
    """Return the constant ratio between consecutive numbers, or None."""
    if numbers[0] == 0:
        return None
    ratio = numbers[1] / numbers[0]
    for previous, current in zip(numbers[1:], numbers[2:]):
        if previous == 0:
            return None
        if current / previous != ratio:
            return None
    return ratio


def classify(numbers: Sequence[Number], location: Optional[SourceLocation] = None) -> Classification:
    """
    Determine whether numbers form an arithmetic or geometric progression.

    Args:
        numbers: Explicit numbers before the ellipsis (at least three)
        location: Where to point the error at, if classification fails

    Returns:
        Classification with the kind and step (difference or ratio)

    Raises:
        ClassificationError: If neither pattern fits
    """
    if len(numbers) < 2:
        raise ValueError(f"need at least two numbers to classify, got {len(numbers)}")

    difference = common_difference(numbers)
    if difference is not None:
        logger.debug("Classified %s as arithmetic, step %r", list(numbers), difference)
        return Classification(SequenceKind.ARITHMETIC, difference)

    ratio = common_ratio(numbers)
    if ratio is not None:
        logger.debug("Classified %s as geometric, step %r", list(numbers), ratio)
        return Classification(SequenceKind.GEOMETRIC, ratio)

    raise create_unclassifiable_error(numbers, location)
