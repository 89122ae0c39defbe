"""
Calculator Evaluator Package

Walks an expression tree bottom-up and computes its value with IEEE-754
float64 semantics.

Author: xwest
"""

from .evaluator import Evaluator, evaluate

__all__ = [
    "Evaluator",
    "evaluate",
]
