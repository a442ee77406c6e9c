"""
numseq Lexer Package

Splits a number sequence specification into NUMBER, COMMA, ELLIPSIS and
INFINITY tokens with source locations for error reporting.

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize
from .errors import Diagnostic, NumSeqError

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "NumSeqError",
]
