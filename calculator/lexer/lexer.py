"""
Calculator lexer - turns expression text into tokens.

Scans one character (Unicode scalar) at a time, so non-ASCII whitespace and
decimal digits are handled the same as their ASCII counterparts. Unary minus
is not special here; the parser decides what a MINUS means.

xwest
"""

import logging
import math
from typing import List, Union

from .tokens import Token, TokenType, SourceLocation, OPERATORS
from .errors import (
    LexerError, LexerWarning, create_unexpected_character_error,
    create_number_overflow_warning
)

logger = logging.getLogger(__name__)

# str.isspace() also accepts the ASCII information separators (U+001C to
# U+001F), which are not White_Space in Unicode.
_INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(char: str) -> bool:
    """Check if a character is Unicode White_Space."""
    return char.isspace() and char not in _INFORMATION_SEPARATORS


class Lexer:
    """
    Calculator lexical analyzer.

    Converts expression text into a list of tokens terminated by END.
    Errors are collected rather than raised so that every bad character
    can be reported; tokenize() raises the first one.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the lexer with expression text.

        Args:
            source: Expression text
            filename: Label used in source locations and diagnostics
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire input.

        Returns:
            List of tokens including the END token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens.clear()
        self.errors.clear()
        self.warnings.clear()

        while self.pos < len(self.source):
            self._skip_whitespace()

            if self.pos >= len(self.source):
                break

            try:
                self.tokens.append(self._next_token())
            except LexerError as e:
                self.errors.append(e)
                # Skip the offending character and keep scanning
                self._advance()

        self.tokens.append(Token(TokenType.END, "", None, self._location()))

        return self.tokens

    def _next_token(self) -> Token:
        """Get the next token from the input."""
        location = self._location()
        current_char = self.source[self.pos]

        if current_char.isdecimal():
            return self._tokenize_number(location)

        token_type = OPERATORS.get(current_char)
        if token_type is not None:
            self._advance()
            return Token(token_type, current_char, None, location)

        raise create_unexpected_character_error(current_char, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize a maximal run of decimal digits."""
        start_pos = self.pos

        while self.pos < len(self.source) and self.source[self.pos].isdecimal():
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        # float() accepts any Unicode decimal digits and rounds to inf on overflow
        value = float(lexeme)

        if math.isinf(value):
            warning = create_number_overflow_warning(lexeme, location)
            self.warnings.append(warning)
            logger.warning("%s at %s", warning.diagnostic.message, location)

        return Token(TokenType.NUMBER, lexeme, value, location)

    def _skip_whitespace(self):
        while self.pos < len(self.source) and is_whitespace(self.source[self.pos]):
            self._advance()

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all diagnostics (errors and warnings)."""
        return self.errors + self.warnings


def tokenize(source: str, filename: str = "<input>") -> List[Token]:
    """
    Tokenize an expression string.

    Args:
        source: Expression text
        filename: Label for error reporting

    Returns:
        List of tokens ending in END

    Raises:
        LexerError: For the first character outside the alphabet
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        raise lexer.errors[0]

    logger.debug("Tokenized %r into %d tokens", source, len(tokens))
    return tokens
