"""
numseq Parser Package

Checks the token stream against the sequence grammar and produces a
SequenceSpec with the explicit numbers, ellipsis flag and optional bound.

Author: xwest
"""

from .ast_nodes import SequenceSpec
from .parser import Parser, parse_string
from .errors import ParseError

__all__ = [
    "Parser",
    "parse_string",
    "SequenceSpec",
    "ParseError",
]
