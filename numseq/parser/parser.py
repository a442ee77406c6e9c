"""
numseq Parser Implementation

Small recursive descent parser over the lexer's token stream:

    spec          := NUMBER (COMMA? NUMBER)* ellipsis-tail? EOF
    ellipsis-tail := COMMA ELLIPSIS (COMMA (NUMBER | INFINITY))?

Author: xwest
"""

import logging
from typing import List

from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType, SourceLocation
from .ast_nodes import SequenceSpec
from .errors import (
    create_leading_comma_error, create_no_numbers_error,
    create_short_prefix_error, create_extraneous_token_error
)

logger = logging.getLogger(__name__)

# Numbers needed before an ellipsis to tell the pattern apart
MIN_PREFIX_NUMBERS = 3

BOUND_TYPES = {TokenType.NUMBER, TokenType.INFINITY}


class Parser:
    """
    Number sequence parser.

    Consumes the whole token stream or raises ParseError; there is no
    error recovery since any error rejects the entire spec.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, terminated by EOF
        """
        self.tokens = tokens
        self.current = 0

    def parse(self) -> SequenceSpec:
        """
        Parse the token stream into a SequenceSpec.

        Raises:
            ParseError: If the spec is malformed
        """
        self.current = 0
        numbers = self._parse_numbers()

        has_ellipsis = False
        last_bound = None
        ellipsis_location = None

        if self._check_separated(TokenType.ELLIPSIS):
            ellipsis = self._peek(1)
            if len(numbers) < MIN_PREFIX_NUMBERS:
                raise create_short_prefix_error(ellipsis, len(numbers))
            self._advance_by(2)
            has_ellipsis = True
            ellipsis_location = ellipsis.location
            last_bound = self._parse_bound()

        if not self._is_at_end():
            raise create_extraneous_token_error(self._peek())

        spec = SequenceSpec(
            source=self._source(),
            numbers=tuple(numbers),
            has_ellipsis=has_ellipsis,
            last_bound=last_bound,
            ellipsis_location=ellipsis_location,
        )
        logger.debug("Parsed %r: %d numbers, ellipsis=%s, bound=%r",
                     spec.source, len(spec.numbers), has_ellipsis, last_bound)
        return spec

    def _parse_numbers(self) -> list:
        """Parse the leading NUMBER (COMMA? NUMBER)* run; "1-2" is 1, -2."""
        first = self._peek()
        if first.type == TokenType.COMMA:
            if self._peek(1).type == TokenType.NUMBER:
                raise create_leading_comma_error(first)
            raise create_no_numbers_error(first)
        if first.type != TokenType.NUMBER:
            raise create_no_numbers_error(first)

        numbers = [self._advance().value]
        while True:
            if self._check_separated(TokenType.NUMBER):
                self._advance()
            elif not self._check(TokenType.NUMBER):
                break
            numbers.append(self._advance().value)
        return numbers

    def _parse_bound(self):
        """Parse the optional bound after the ellipsis."""
        for token_type in BOUND_TYPES:
            if self._check_separated(token_type):
                self._advance()
                return self._advance().value
        return None

    # Token stream helpers

    def _check_separated(self, token_type: TokenType) -> bool:
        """Check for COMMA followed by the given token type, without consuming."""
        return self._check(TokenType.COMMA) and self._peek(1).type == token_type

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self._peek()
        if not self._is_at_end():
            self.current += 1
        return token

    def _advance_by(self, count: int):
        for _ in range(count):
            self._advance()

    def _is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self._peek().type == TokenType.EOF

    def _peek(self, ahead: int = 0) -> Token:
        """Return a token without consuming."""
        index = self.current + ahead
        if index < len(self.tokens):
            return self.tokens[index]
        # Return EOF token if past end, located like the lexer's own EOF
        source = self._source()
        return Token(TokenType.EOF, "", None, SourceLocation(source, len(source) + 1, len(source)))

    def _source(self) -> str:
        if self.tokens:
            return self.tokens[0].location.source
        return ""


def parse_string(source: str) -> SequenceSpec:
    """Convenience function to tokenize and parse a spec string."""
    return Parser(Lexer(source).tokenize()).parse()
