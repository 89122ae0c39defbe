"""
Calculator Parser Package

Implements a recursive descent parser for arithmetic expressions and
produces immutable Abstract Syntax Trees with source spans.

Key Features:
- One parsing method per precedence level
- Left-associative + - * /, right-associative ^
- Nested unary minus
- Diagnostics naming the offending token

Author: xwest
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, SourceSpan,
    Literal, UnaryOp, BinaryOp, UnaryOperator, BinaryOperator, to_source
)
from .parser import Parser, parse, parse_string
from .errors import ParseError, ParseErrorKind, describe_token

__all__ = [
    # Core parser
    "Parser", "parse", "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "ASTVisitor", "SourceSpan",
    "Literal", "UnaryOp", "BinaryOp", "UnaryOperator", "BinaryOperator",
    "to_source",

    # Error handling
    "ParseError", "ParseErrorKind", "describe_token",
]
