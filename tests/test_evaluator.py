"""
Unit tests for the calculator evaluator.

Author: xwest
"""

import math
import unittest
import sys
import os
import warnings

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from calculator.evaluator import Evaluator, evaluate
from calculator.parser import (
    parse_string, Literal, UnaryOp, BinaryOp, UnaryOperator, BinaryOperator
)


def binary(left, operator, right):
    return BinaryOp(Literal(float(left)), operator, Literal(float(right)))


class TestEvaluator(unittest.TestCase):
    """Test evaluation of hand-built and parsed trees."""

    def test_literal(self):
        self.assertEqual(evaluate(Literal(3.0)), 3.0)

    def test_negation(self):
        self.assertEqual(evaluate(UnaryOp(UnaryOperator.NEGATE, Literal(3.0))), -3.0)
        self.assertEqual(
            evaluate(UnaryOp(UnaryOperator.NEGATE, UnaryOp(UnaryOperator.NEGATE, Literal(3.0)))),
            3.0
        )

    def test_binary_operators(self):
        self.assertEqual(evaluate(binary(2, BinaryOperator.ADD, 3)), 5.0)
        self.assertEqual(evaluate(binary(2, BinaryOperator.SUBTRACT, 3)), -1.0)
        self.assertEqual(evaluate(binary(2, BinaryOperator.MULTIPLY, 3)), 6.0)
        self.assertEqual(evaluate(binary(1, BinaryOperator.DIVIDE, 2)), 0.5)
        self.assertEqual(evaluate(binary(2, BinaryOperator.POWER, 10)), 1024.0)

    def test_operand_order(self):
        """Test that non-commutative operators use left then right."""
        self.assertEqual(evaluate(parse_string("10 - 4 - 3")), 3.0)
        self.assertEqual(evaluate(parse_string("64 / 4 / 2")), 8.0)
        self.assertEqual(evaluate(parse_string("2 ^ 3 ^ 2")), 512.0)

    def test_result_is_builtin_float(self):
        result = evaluate(parse_string("1 + 2"))
        self.assertIs(type(result), float)

    def test_fractional_and_negative_exponents(self):
        self.assertAlmostEqual(
            evaluate(BinaryOp(Literal(2.0), BinaryOperator.POWER, Literal(0.5))),
            math.sqrt(2)
        )
        self.assertEqual(evaluate(parse_string("2 ^ -2")), 0.25)
        self.assertAlmostEqual(evaluate(parse_string("8 ^ (1 / 3)")), 2.0)

    def test_unknown_node(self):
        with self.assertRaises(TypeError):
            Evaluator().evaluate(object())

    def test_accept_dispatches_to_evaluator(self):
        tree = parse_string("6 * 7")
        self.assertEqual(tree.accept(Evaluator()), 42.0)

    def test_deep_trees(self):
        """Test that tree depth is not limited by the recursion limit."""
        tree = Literal(1.0)
        for _ in range(5001):
            tree = UnaryOp(UnaryOperator.NEGATE, tree)
        self.assertEqual(evaluate(tree), -1.0)

        tree = Literal(0.0)
        for _ in range(5000):
            tree = BinaryOp(tree, BinaryOperator.ADD, Literal(1.0))
        self.assertEqual(evaluate(tree), 5000.0)

    def test_unknown_child_node(self):
        with self.assertRaises(TypeError):
            evaluate(UnaryOp(UnaryOperator.NEGATE, "1"))


class TestIEEESemantics(unittest.TestCase):
    """Test that arithmetic edge cases produce special values, not exceptions."""

    def test_division_by_zero(self):
        self.assertEqual(evaluate(parse_string("1 / 0")), math.inf)
        self.assertEqual(evaluate(parse_string("-1 / 0")), -math.inf)
        self.assertTrue(math.isnan(evaluate(parse_string("0 / 0"))))

    def test_negative_base_fractional_exponent(self):
        self.assertTrue(math.isnan(evaluate(parse_string("(0 - 8) ^ (1 / 3)"))))

    def test_zero_to_negative_power(self):
        self.assertEqual(evaluate(parse_string("0 ^ (0 - 1)")), math.inf)

    def test_overflow(self):
        self.assertEqual(evaluate(parse_string("10 ^ 400")), math.inf)
        self.assertEqual(evaluate(parse_string("-(10 ^ 400)")), -math.inf)

    def test_nan_propagates(self):
        self.assertTrue(math.isnan(evaluate(parse_string("0 / 0 + 1"))))
        self.assertTrue(math.isnan(evaluate(parse_string("1 / 0 - 1 / 0"))))

    def test_no_runtime_warnings(self):
        """Test that special values are produced silently."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            evaluate(parse_string("1 / 0"))
            evaluate(parse_string("0 / 0"))
            evaluate(parse_string("(0 - 8) ^ (1 / 3)"))
            evaluate(parse_string("10 ^ 400"))


if __name__ == '__main__':
    unittest.main()
