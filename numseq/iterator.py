"""
Lazy value generation for parsed number sequences.

A SequenceIterator replays the explicit numbers and then, for sequences
with an ellipsis, keeps applying the step until the bound is passed. A
sequence without a bound never ends; stopping is up to the caller.

Author: xwest
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .analyzer.classifier import SequenceKind
from .config import OptionsLike
from .lexer.tokens import Number
from .sequence import ParsedSequence, parse_sequence

logger = logging.getLogger(__name__)

# Returned once the sequence is exhausted
END = None


class GeneratorPhase(Enum):
    REPLAYING = auto()
    PROGRESSING = auto()
    EXHAUSTED = auto()


@dataclass
class GeneratorState:
    """
    Mutable generation state for one iterator.

    `advance` moves the state machine one value forward and returns the
    value, or END once the sequence is exhausted.
    """
    index: int = 0
    current: Optional[Number] = None
    phase: GeneratorPhase = GeneratorPhase.REPLAYING

    @property
    def exhausted(self) -> bool:
        return self.phase == GeneratorPhase.EXHAUSTED

    def advance(self, sequence: ParsedSequence) -> Optional[Number]:
        if self.phase == GeneratorPhase.REPLAYING:
            if self.index < len(sequence.numbers):
                value = sequence.numbers[self.index]
                self.index += 1
                return value
            if not sequence.has_ellipsis:
                return self._exhaust(sequence)
            self.phase = GeneratorPhase.PROGRESSING
            self.current = sequence.numbers[-1]

        if self.phase == GeneratorPhase.PROGRESSING:
            value = next_value(sequence, self.current)
            self.current = value
            if sequence.last_bound is not None and exceeds_bound(sequence, value):
                return self._exhaust(sequence)
            return value

        return END

    def _exhaust(self, sequence: ParsedSequence) -> Optional[Number]:
        self.phase = GeneratorPhase.EXHAUSTED
        logger.debug("Sequence %s exhausted after %d explicit numbers",
                     list(sequence.numbers), self.index)
        return END


def next_value(sequence: ParsedSequence, current: Number) -> Number:
    """Apply the sequence step to the current value."""
    if sequence.kind == SequenceKind.ARITHMETIC:
        return current + sequence.step
    if sequence.kind == SequenceKind.GEOMETRIC:
        return current * sequence.step
    raise ValueError(f"{sequence.kind.value} sequence has no step")


def exceeds_bound(sequence: ParsedSequence, value: Number) -> bool:
    """
    Check whether value has gone past the bound in the sequence's direction.

    Direction is given by the step: arithmetic sequences rise for a step
    >= 0, geometric sequences for a ratio >= 1.
    """
    bound = sequence.last_bound
    pivot = 0 if sequence.kind == SequenceKind.ARITHMETIC else 1
    if sequence.step >= pivot:
        return value > bound
    return value < bound


class SequenceIterator:
    """
    Pull-based generator over a ParsedSequence.

    Calling the iterator returns the next value, or None once the
    sequence is exhausted (and on every call after that). It also works
    as a regular Python iterator, stopping at the end of the sequence.
    """

    def __init__(self, sequence: ParsedSequence):
        self.sequence = sequence
        self._state = GeneratorState()

    @property
    def exhausted(self) -> bool:
        return self._state.exhausted

    def __call__(self) -> Optional[Number]:
        return self._state.advance(self.sequence)

    def __iter__(self):
        return self

    def __next__(self) -> Number:
        value = self()
        if value is END:
            raise StopIteration
        return value

    def __repr__(self) -> str:
        return f"SequenceIterator({self.sequence!r}, phase={self._state.phase.name})"


def iterate_sequence(spec: str, options: OptionsLike = None) -> SequenceIterator:
    """
    Build a SequenceIterator for a spec string.

    Raises:
        ParseError: If the spec is malformed
        ClassificationError: If the pattern can't be determined
    """
    return SequenceIterator(parse_sequence(spec, options))
