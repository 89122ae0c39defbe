"""
Token definitions for the calculator lexer.

The alphabet is deliberately tiny: decimal digit runs, the four arithmetic
operators, exponentiation and parentheses. Every token sequence produced by
the lexer is terminated by a single END token.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    """Enumeration of all token types understood by the calculator."""

    # Literals
    NUMBER = auto()                 # 42, 007 (digit runs only)

    # Operators
    PLUS = auto()                   # +
    MINUS = auto()                  # - (binary subtraction or unary negation)
    STAR = auto()                   # *
    SLASH = auto()                  # /
    CARET = auto()                  # ^ (exponentiation, right associative)

    # Grouping
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )

    # Sentinel
    END = auto()                    # End of input, always the last token


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the input text.

    Offsets count characters (Unicode scalars), not bytes.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Contains the token type, lexeme (raw text), semantic value and
    source location. Only NUMBER tokens carry a value (a float).
    """
    type: TokenType
    lexeme: str
    value: Optional[float]
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a numeric literal."""
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        """Check if this token is an arithmetic operator."""
        return self.type in {
            TokenType.PLUS, TokenType.MINUS, TokenType.STAR,
            TokenType.SLASH, TokenType.CARET,
        }

    @property
    def is_end(self) -> bool:
        return self.type == TokenType.END


# Single-character operators and punctuation
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "^": TokenType.CARET,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}

# Characters that are commonly typed (or pasted) in place of a supported operator
OPERATOR_LOOKALIKES = {
    "×": "*",
    "·": "*",
    "⋅": "*",
    "÷": "/",
    "−": "-",
    "–": "-",
    "—": "-",
    "（": "(",
    "）": ")",
}
