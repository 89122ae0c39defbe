"""
Calculator Package

Evaluates arithmetic expressions given as text. The work is split into
three stages plus a facade that ties them together:

Architecture:
    calculator/
    ├── lexer/           # Tokenization
    ├── parser/          # Recursive descent parsing and AST
    ├── evaluator/       # Tree evaluation with IEEE-754 semantics
    └── pipeline.py      # evaluate_expression() / calculate()

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Lexer, tokenize
from .parser import Parser, parse
from .evaluator import Evaluator, evaluate
from .pipeline import (
    Stage, CalculationError, EvaluationResult, calculate, evaluate_expression
)

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Evaluator",

    # Pipeline stages
    "tokenize",
    "parse",
    "evaluate",

    # Facade
    "evaluate_expression",
    "calculate",
    "EvaluationResult",
    "CalculationError",
    "Stage",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
