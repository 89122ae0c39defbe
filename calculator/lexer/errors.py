"""
Error handling for the calculator lexer.

Provides error reporting with source location information and
suggestions for characters that look like supported operators.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation, OPERATOR_LOOKALIKES


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer meets a character outside its alphabet.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        char: Optional[str] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.char = char

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop evaluation.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """Utilities for explaining lexer errors."""

    @staticmethod
    def suggest_ascii_alternatives(char: str) -> List[str]:
        """Suggest the ASCII operator a look-alike character probably stands for."""
        replacement = OPERATOR_LOOKALIKES.get(char)
        if replacement is None:
            return []
        return [f"Replace '{char}' with '{replacement}'"]


ERROR_CODES = {
    "L001": "Unexpected character",
    "L007": "Number literal overflow",
}


def create_unexpected_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character outside the calculator alphabet."""
    suggestions = ErrorRecovery.suggest_ascii_alternatives(char)

    if suggestions:
        help_text = f"'{char}' looks like '{OPERATOR_LOOKALIKES[char]}', but only ASCII operators are supported."
    elif char.isprintable():
        help_text = "Only digits, whitespace and the characters ( ) + - * / ^ are allowed."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Unexpected character: {char}",
        location=location,
        char=char,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_number_overflow_warning(lexeme: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a digit run that does not fit in a 64-bit float."""
    shown = lexeme if len(lexeme) <= 20 else f"{lexeme[:17]}..."
    return LexerWarning(
        message=f"Number literal overflow: '{shown}' ({len(lexeme)} digits)",
        location=location,
        code="L007",
        help_text="The literal exceeds the largest 64-bit float and evaluates as infinity.",
    )
