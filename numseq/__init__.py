"""
numseq - number sequence specifications

Turns a compact spec such as "1,3,5,...,13" or "2,6,18,..." into either a
structured description or a lazy generator of its values, including
open-ended (infinite) arithmetic and geometric sequences.

Architecture:
    numseq/
    ├── lexer/           # Tokenization
    ├── parser/          # Grammar checks, SequenceSpec
    ├── analyzer/        # Arithmetic/geometric classification
    ├── sequence.py      # ParsedSequence descriptor
    ├── iterator.py      # Pull-based generator
    └── api.py           # numseq_iter / numseq_parse

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "xwest@users.noreply.github.com"
__license__ = "MIT"

from .lexer import Lexer, NumSeqError
from .parser import Parser, ParseError
from .analyzer import SequenceKind, ClassificationError, classify
from .config import ParseOptions
from .sequence import ParsedSequence, build_sequence, parse_sequence
from .iterator import SequenceIterator, GeneratorState, iterate_sequence
from .api import Response, numseq_iter, numseq_parse

__all__ = [
    # Entry points
    "numseq_iter",
    "numseq_parse",
    "parse_sequence",
    "iterate_sequence",

    # Stages
    "Lexer",
    "Parser",
    "classify",
    "build_sequence",

    # Data
    "ParsedSequence",
    "SequenceKind",
    "SequenceIterator",
    "GeneratorState",
    "ParseOptions",
    "Response",

    # Errors
    "NumSeqError",
    "ParseError",
    "ClassificationError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
