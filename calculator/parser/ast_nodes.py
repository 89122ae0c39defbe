"""
Abstract Syntax Tree node definitions for the calculator.

Three node kinds are enough for arithmetic: literals, unary negation and
binary operations. Nodes are immutable and own their children outright;
there are no parent links.

Author: xwest
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

from ..lexer.tokens import SourceLocation, TokenType


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    UNARY_OP = "UnaryOp"
    BINARY_OP = "BinaryOp"


class BinaryOperator(Enum):
    """Binary arithmetic operators, valued by their source symbol."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"

    @classmethod
    def from_token_type(cls, token_type: TokenType) -> "BinaryOperator":
        return _BINARY_OPERATORS[token_type]


class UnaryOperator(Enum):
    """Unary operators, valued by their source symbol."""
    NEGATE = "-"


_BINARY_OPERATORS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUBTRACT,
    TokenType.STAR: BinaryOperator.MULTIPLY,
    TokenType.SLASH: BinaryOperator.DIVIDE,
    TokenType.CARET: BinaryOperator.POWER,
}


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source text (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """
    Base class for all AST nodes.

    Concrete nodes are frozen dataclasses. Their span is excluded from
    equality, so trees compare by structure alone.
    """

    node_type: ASTNodeType

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    def walk(self):
        """Yield this node and all of its descendants, parents first."""
        stack: List['ASTNode'] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def __str__(self) -> str:
        span = getattr(self, "span", None)
        if span is None:
            return self.node_type.value
        return f"{self.node_type.value}@{span}"


@dataclass(frozen=True)
class Literal(ASTNode):
    """Numeric literal."""
    value: float
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.LITERAL

    def children(self) -> List[ASTNode]:
        return []


@dataclass(frozen=True)
class UnaryOp(ASTNode):
    """Unary operation expression."""
    operator: UnaryOperator
    operand: ASTNode
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.UNARY_OP

    def children(self) -> List[ASTNode]:
        return [self.operand]


@dataclass(frozen=True)
class BinaryOp(ASTNode):
    """Binary operation expression. Operand order matters for -, / and ^."""
    left: ASTNode
    operator: BinaryOperator
    right: ASTNode
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    node_type = ASTNodeType.BINARY_OP

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]


def to_source(node: ASTNode) -> str:
    """Render a tree back to fully parenthesised expression text."""
    rendered: List[str] = []
    pending: List[Tuple[ASTNode, bool]] = [(node, False)]

    while pending:
        current, children_done = pending.pop()
        if isinstance(current, Literal):
            rendered.append(_format_number(current.value))
        elif not isinstance(current, (UnaryOp, BinaryOp)):
            raise TypeError(f"Unknown AST node: {current!r}")
        elif not children_done:
            pending.append((current, True))
            pending.extend((child, False) for child in reversed(current.children()))
        elif isinstance(current, UnaryOp):
            rendered.append(f"({current.operator.value}{rendered.pop()})")
        else:
            right = rendered.pop()
            left = rendered.pop()
            rendered.append(f"({left} {current.operator.value} {right})")

    return rendered.pop()


def _format_number(value: float) -> str:
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(value)
