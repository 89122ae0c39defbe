"""
Tree-walking evaluator for calculator expressions.

Arithmetic follows IEEE-754 binary64 rules throughout: division by zero,
overflow and negative bases with fractional exponents produce inf or nan
instead of raising. Python's own float operators raise ZeroDivisionError
and OverflowError (and ** can return a complex), so every operation goes
through a NumPy float64 ufunc with floating-point errors ignored.

Author: xwest
"""

import logging
from typing import Callable, Dict, List, Tuple

import numpy as np

from ..parser.ast_nodes import (
    ASTNode, ASTVisitor, BinaryOp, BinaryOperator, Literal, UnaryOp, UnaryOperator
)

logger = logging.getLogger(__name__)


BINARY_UFUNCS: Dict[BinaryOperator, Callable] = {
    BinaryOperator.ADD: np.add,
    BinaryOperator.SUBTRACT: np.subtract,
    BinaryOperator.MULTIPLY: np.multiply,
    BinaryOperator.DIVIDE: np.divide,
    BinaryOperator.POWER: np.power,
}

UNARY_UFUNCS: Dict[UnaryOperator, Callable] = {
    UnaryOperator.NEGATE: np.negative,
}


class Evaluator(ASTVisitor):
    """
    Computes the value of an expression tree.

    Children are evaluated before their operator is applied (post-order).
    The walk keeps its own stack, so tree depth is not bounded by the
    interpreter's recursion limit. The tree is only read, never modified.
    """

    def evaluate(self, node: ASTNode) -> float:
        with np.errstate(all="ignore"):
            return float(self.visit(node))

    def visit(self, node: ASTNode) -> np.float64:
        values: List[np.float64] = []
        # (node, children_done) pairs still to be handled
        pending: List[Tuple[ASTNode, bool]] = [(node, False)]

        while pending:
            current, children_done = pending.pop()
            if not isinstance(current, (Literal, UnaryOp, BinaryOp)):
                raise TypeError(f"Cannot evaluate {type(current).__name__}")

            if children_done:
                values.append(self._apply(current, values))
                continue

            pending.append((current, True))
            # Reversed so the left operand is evaluated first
            for child in reversed(current.children()):
                pending.append((child, False))

        return values.pop()

    def _apply(self, node: ASTNode, values: List[np.float64]) -> np.float64:
        """Combine a node with its already evaluated operands from the value stack."""
        if isinstance(node, Literal):
            return self._evaluate_literal(node)
        elif isinstance(node, UnaryOp):
            return self._evaluate_unary_op(node, values.pop())
        right = values.pop()
        left = values.pop()
        return self._evaluate_binary_op(node, left, right)

    def _evaluate_literal(self, literal: Literal) -> np.float64:
        return np.float64(literal.value)

    def _evaluate_unary_op(self, unary_op: UnaryOp, operand: np.float64) -> np.float64:
        return UNARY_UFUNCS[unary_op.operator](operand)

    def _evaluate_binary_op(self, binary_op: BinaryOp, left: np.float64,
                            right: np.float64) -> np.float64:
        return BINARY_UFUNCS[binary_op.operator](left, right)


def evaluate(node: ASTNode) -> float:
    """
    Evaluate an expression tree to a float.

    Never raises for arithmetic reasons; inf and nan propagate.
    """
    result = Evaluator().evaluate(node)
    logger.debug("Evaluated %s to %r", node, result)
    return result
