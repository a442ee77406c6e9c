"""
numseq Analyzer Package

Classifies the explicit numbers of an open-ended sequence as an
arithmetic or geometric progression and works out its step.

Author: xwest
"""

from .classifier import (
    SequenceKind, Classification, classify, common_difference, common_ratio
)
from .errors import ClassificationError

__all__ = [
    "SequenceKind",
    "Classification",
    "classify",
    "common_difference",
    "common_ratio",
    "ClassificationError",
]
