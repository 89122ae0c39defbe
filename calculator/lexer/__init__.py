"""
Calculator Lexer Package

Implements the lexical analyzer (tokenizer) for arithmetic expressions.

Key Features:
- Unicode-aware scanning (non-ASCII whitespace and decimal digits)
- Digit-run number literals as 64-bit floats
- Source location tracking for diagnostics
- Look-alike operator suggestions in error messages

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize
from .errors import LexerError, LexerWarning

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",
    "LexerWarning",
]
