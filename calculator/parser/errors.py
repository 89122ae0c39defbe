"""
Error handling for the calculator parser.

Every syntax error names the token the parser found instead of what it
wanted, or "nothing" when the token list ran out.

Author: xwest
"""

from enum import Enum
from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic


class ParseErrorKind(Enum):
    """The distinct ways a token stream can fail to match the grammar."""
    EXPECTED_PRIMARY = "expected_primary"
    EXPECTED_CLOSE_PAREN = "expected_close_paren"
    EXPECTED_END = "expected_end"
    NESTING_TOO_DEEP = "nesting_too_deep"


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    `found` is the offending token, or None at end of input.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        location: SourceLocation,
        found: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.found = found
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


PARSER_ERROR_CODES = {
    "P001": "Expected a primary expression",
    "P002": "Unexpected trailing input",
    "P004": "Unclosed parenthesis",
    "P005": "Expression nested too deeply",
}


_TOKEN_DESCRIPTIONS = {
    TokenType.PLUS: "'+'",
    TokenType.MINUS: "'-'",
    TokenType.STAR: "'*'",
    TokenType.SLASH: "'/'",
    TokenType.CARET: "'^'",
    TokenType.LEFT_PAREN: "an opening parenthesis '('",
    TokenType.RIGHT_PAREN: "a closing parenthesis ')'",
    TokenType.END: "the end token",
}


def describe_token(token: Optional[Token]) -> str:
    """Human readable name of a token for use in error messages."""
    if token is None:
        return "nothing"
    if token.type == TokenType.NUMBER:
        return f"the number {token.lexeme}"
    return _TOKEN_DESCRIPTIONS[token.type]


# Helper functions for creating the parser errors

def create_expected_primary_error(found: Optional[Token], location: SourceLocation) -> ParseError:
    """Create an error for a missing operand."""
    suggestions = []
    if found is not None and found.is_operator:
        suggestions.append(f"Add an operand before {describe_token(found)}")
    elif found is None or found.type in (TokenType.END, TokenType.RIGHT_PAREN):
        suggestions.append("Complete the expression with a number or a parenthesised expression")

    return ParseError(
        kind=ParseErrorKind.EXPECTED_PRIMARY,
        message=(
            "Expected a number (positive or negative) or an expression wrapped inside "
            f"parentheses, but instead got {describe_token(found)}"
        ),
        location=location,
        found=found,
        code="P001",
        help_text="Every operator needs an operand on each side; '-' may also prefix an operand.",
        suggestions=suggestions
    )


def create_expected_close_paren_error(found: Optional[Token], location: SourceLocation,
                                      open_location: Optional[SourceLocation] = None) -> ParseError:
    """Create an error for an unclosed parenthesis."""
    help_text = None
    if open_location is not None:
        help_text = f"The opening '(' at {open_location} was never closed."

    return ParseError(
        kind=ParseErrorKind.EXPECTED_CLOSE_PAREN,
        message=f"Expected a closing parenthesis ')', but instead got {describe_token(found)}",
        location=location,
        found=found,
        code="P004",
        help_text=help_text,
        suggestions=["Add a closing parenthesis ')'"]
    )


def create_expected_end_error(found: Optional[Token], location: SourceLocation) -> ParseError:
    """Create an error for input left over after a complete expression."""
    suggestions = []
    if found is not None and found.type == TokenType.RIGHT_PAREN:
        suggestions.append("Remove the unmatched ')' or add a matching '('")
    elif found is not None and found.type in (TokenType.NUMBER, TokenType.LEFT_PAREN):
        suggestions.append("Insert an operator such as '*' between the operands")

    return ParseError(
        kind=ParseErrorKind.EXPECTED_END,
        message=f"Expected the end token, but instead got {describe_token(found)}",
        location=location,
        found=found,
        code="P002",
        help_text="The expression was complete before this point.",
        suggestions=suggestions
    )


def create_nesting_too_deep_error(found: Optional[Token], location: SourceLocation,
                                  depth: int) -> ParseError:
    """Create an error for parentheses nested past the interpreter's recursion limit."""
    return ParseError(
        kind=ParseErrorKind.NESTING_TOO_DEEP,
        message="Expression is nested too deeply",
        location=location,
        found=found,
        code="P005",
        help_text=f"Parsing gave up after {depth} levels of open parentheses.",
        suggestions=["Remove redundant parentheses"]
    )
