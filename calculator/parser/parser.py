"""
Calculator Recursive Descent Parser

One method per grammar rule, lowest precedence first:

    Expr   := Term   { ("+" | "-") Term }
    Term   := Power  { ("*" | "/") Power }
    Power  := Unary  [ "^" Power ]
    Unary  := NUMBER | "(" Expr ")" | "-" Unary

Left-associative levels are folded in a loop. Power operands and leading
minus signs are collected in a loop too and folded from the right, so that
2^3^2 groups as 2^(3^2) and long chains cost no stack. Only parentheses
recurse; input nested past the interpreter's recursion limit is reported as
a ParseError.

Author: xwest
"""

import logging
from typing import List, Optional

from ..lexer.tokens import Token, TokenType, SourceLocation
from .ast_nodes import (
    ASTNode, BinaryOp, BinaryOperator, Literal, SourceSpan, UnaryOp, UnaryOperator
)
from .errors import (
    ParseError, create_expected_primary_error, create_expected_close_paren_error,
    create_expected_end_error, create_nesting_too_deep_error
)

logger = logging.getLogger(__name__)


class Parser:
    """
    Calculator parser.

    Walks an immutable token list with a cursor index. The list is expected
    to end with END; the parser never reads past the end of the list.
    """

    # Operators handled at each left-associative level
    TERM_OPERATORS = (TokenType.PLUS, TokenType.MINUS)
    FACTOR_OPERATORS = (TokenType.STAR, TokenType.SLASH)

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer
        """
        self.tokens = tokens
        self.current = 0
        self._open_parens: List[Token] = []

    def parse(self) -> ASTNode:
        """
        Parse the token list into an AST.

        Returns:
            Root node of the expression tree

        Raises:
            ParseError: On the first syntax error
        """
        self.current = 0
        self._open_parens.clear()
        try:
            node = self._parse_expression()
        except RecursionError:
            found = self._peek()
            raise create_nesting_too_deep_error(
                found, self._location_of(found), len(self._open_parens)
            ) from None

        found = self._peek()
        if found is None or found.type != TokenType.END:
            raise create_expected_end_error(found, self._location_of(found))

        return node

    def _parse_expression(self) -> ASTNode:
        """Expr := Term { ("+" | "-") Term }"""
        node = self._parse_term()

        while self._check(*self.TERM_OPERATORS):
            operator_token = self._advance()
            right = self._parse_term()
            node = self._make_binary(node, operator_token, right)

        return node

    def _parse_term(self) -> ASTNode:
        """Term := Power { ("*" | "/") Power }"""
        node = self._parse_power()

        while self._check(*self.FACTOR_OPERATORS):
            operator_token = self._advance()
            right = self._parse_power()
            node = self._make_binary(node, operator_token, right)

        return node

    def _parse_power(self) -> ASTNode:
        """Power := Unary [ "^" Power ]"""
        operands = [self._parse_unary()]
        operator_tokens = []

        while self._check(TokenType.CARET):
            operator_tokens.append(self._advance())
            operands.append(self._parse_unary())

        # Right associative: fold from the last exponent backwards
        node = operands.pop()
        while operands:
            node = self._make_binary(operands.pop(), operator_tokens.pop(), node)

        return node

    def _parse_unary(self) -> ASTNode:
        """Unary := NUMBER | "(" Expr ")" | "-" Unary"""
        minus_tokens = []
        while self._check(TokenType.MINUS):
            minus_tokens.append(self._advance())

        node = self._parse_primary()

        # The minus closest to the operand applies first
        while minus_tokens:
            token = minus_tokens.pop()
            span = SourceSpan(token.location, node.span.end)
            node = UnaryOp(UnaryOperator.NEGATE, node, span)

        return node

    def _parse_primary(self) -> ASTNode:
        """NUMBER | "(" Expr ")" """
        token = self._peek()

        if token is not None and token.type == TokenType.NUMBER:
            self._advance()
            return Literal(token.value, SourceSpan(token.location, token.location))

        if token is not None and token.type == TokenType.LEFT_PAREN:
            return self._parse_grouping()

        raise create_expected_primary_error(token, self._location_of(token))

    def _parse_grouping(self) -> ASTNode:
        """Parse parenthesized expression."""
        open_token = self._advance()  # Consume (
        self._open_parens.append(open_token)

        expr = self._parse_expression()

        closing = self._peek()
        if closing is None or closing.type != TokenType.RIGHT_PAREN:
            raise create_expected_close_paren_error(
                closing, self._location_of(closing), open_token.location
            )
        self._advance()
        self._open_parens.pop()

        return expr

    # Utility methods

    def _make_binary(self, left: ASTNode, operator_token: Token, right: ASTNode) -> BinaryOp:
        span = SourceSpan(left.span.start, right.span.end)
        return BinaryOp(left, BinaryOperator.from_token_type(operator_token.type), right, span)

    def _check(self, *token_types: TokenType) -> bool:
        """Check if current token has one of the given types without consuming."""
        token = self._peek()
        return token is not None and token.type in token_types

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self.tokens[self.current]
        self.current += 1
        return token

    def _peek(self) -> Optional[Token]:
        """Return current token without consuming, or None past the end."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def _location_of(self, token: Optional[Token]) -> SourceLocation:
        """Location to report for a token, falling back to the last token seen."""
        if token is not None:
            return token.location
        if self.tokens:
            return self.tokens[-1].location
        return SourceLocation("<input>", 1, 1, 0)


def parse(tokens: List[Token]) -> ASTNode:
    """
    Parse a token list into an expression tree.

    Raises:
        ParseError: If the tokens do not form a single expression
    """
    node = Parser(tokens).parse()
    logger.debug("Parsed %d tokens into %s", len(tokens), node)
    return node


def parse_string(source: str, filename: str = "<input>") -> ASTNode:
    """
    Convenience function to parse an expression string.

    Args:
        source: Expression text
        filename: Label for error reporting

    Returns:
        Expression tree

    Raises:
        LexerError: If tokenizing fails
        ParseError: If parsing fails
    """
    from ..lexer import tokenize

    return parse(tokenize(source, filename))
