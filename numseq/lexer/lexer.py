"""
numseq Lexer - turns a number sequence spec into tokens

The grammar is tiny, so the lexer never gives up with an exception.
Whatever it can't make sense of becomes a single INVALID token covering
the rest of the spec, and the parser reports it as an extraneous token.

xwest
"""

import re
from typing import List

from .tokens import Token, TokenType, SourceLocation, ELLIPSIS, INFINITY_WORD


class Lexer:
    """
    Number sequence lexical analyzer.

    Converts a spec string such as ``"1, 3, 5, ..., 13"`` into a list of
    tokens terminated by EOF.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer with a spec.

        Args:
            source: Number sequence specification
        """
        if not isinstance(source, str):
            raise TypeError(f"number sequence must be a string, got {type(source).__name__}")
        self.source = source
        self.pos = 0
        self.tokens: List[Token] = []

        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""

        # Signed decimal, digits required on both sides of the point
        self.number_pattern = re.compile(r'[+-]?[0-9]+(?:\.[0-9]+)?')
        self.infinity_pattern = re.compile(r'([+-]?)' + INFINITY_WORD)

        # Whitespace is only allowed around a comma
        self.separator_pattern = re.compile(r'\s*,\s*')

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire spec.

        Returns:
            List of tokens including EOF token
        """
        self.pos = 0
        self.tokens.clear()

        while self.pos < len(self.source):
            token = self._next_token()
            self.tokens.append(token)
            if token.type == TokenType.INVALID:
                break

        self.tokens.append(Token(TokenType.EOF, "", None, self._location(self.pos)))
        return self.tokens

    def _next_token(self) -> Token:
        """Get the next token from the spec."""
        start_pos = self.pos

        match = self.separator_pattern.match(self.source, self.pos)
        if match:
            return self._emit(TokenType.COMMA, match.group(0), None, start_pos)

        if self.source.startswith(ELLIPSIS, self.pos):
            return self._emit(TokenType.ELLIPSIS, ELLIPSIS, None, start_pos)

        # Inf before numbers so "+Inf" isn't a stray sign
        match = self.infinity_pattern.match(self.source, self.pos)
        if match:
            value = float("-inf") if match.group(1) == "-" else float("inf")
            return self._emit(TokenType.INFINITY, match.group(0), value, start_pos)

        match = self.number_pattern.match(self.source, self.pos)
        if match:
            lexeme = match.group(0)
            return self._emit(TokenType.NUMBER, lexeme, self._parse_number(lexeme), start_pos)

        return self._emit(TokenType.INVALID, self.source[start_pos:], None, start_pos)

    def _emit(self, token_type: TokenType, lexeme: str, value, start_pos: int) -> Token:
        self.pos = start_pos + len(lexeme)
        return Token(token_type, lexeme, value, self._location(start_pos))

    def _location(self, offset: int) -> SourceLocation:
        return SourceLocation(self.source, offset + 1, offset)

    @staticmethod
    def _parse_number(lexeme: str):
        """Integers stay exact; only literals with a fractional part become floats."""
        if '.' in lexeme:
            return float(lexeme)
        return int(lexeme)


def tokenize(source: str) -> List[Token]:
    """Convenience function to tokenize a spec string."""
    return Lexer(source).tokenize()
