"""
Expression evaluation pipeline: text -> tokens -> AST -> number.

This is the surface an interactive shell or embedding application calls.
Failures are reported with the stage that produced them, as
"[tokenizer]: ..." or "[parser]: ...".

Author: xwest
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .lexer import tokenize, LexerError
from .parser import parse, ParseError, to_source
from .evaluator import evaluate

logger = logging.getLogger(__name__)


class Stage(Enum):
    """Pipeline stages that can reject an input."""
    TOKENIZER = "tokenizer"
    PARSER = "parser"


class CalculationError(Exception):
    """
    Raised by calculate() when the input cannot be evaluated.

    The underlying LexerError or ParseError is chained as __cause__.
    """

    def __init__(self, stage: Stage, message: str):
        super().__init__(f"[{stage.value}]: {message}")
        self.stage = stage
        self.message = message


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluate_expression(): either a value or a tagged error message."""
    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the value, or raise ValueError carrying the error message."""
        if self.error is not None:
            raise ValueError(self.error)
        return self.value


def calculate(text: str, filename: str = "<input>") -> float:
    """
    Evaluate an arithmetic expression.

    Args:
        text: Expression text, e.g. "-3 + 7 * 2 ^ 2"
        filename: Label for source locations in diagnostics

    Returns:
        The value as a float (possibly inf or nan)

    Raises:
        CalculationError: If the text fails to tokenize or parse
    """
    try:
        tokens = tokenize(text, filename)
    except LexerError as e:
        raise CalculationError(Stage.TOKENIZER, e.message) from e

    try:
        tree = parse(tokens)
    except ParseError as e:
        raise CalculationError(Stage.PARSER, e.message) from e

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Evaluating %s", to_source(tree))
    return evaluate(tree)


def evaluate_expression(text: str, filename: str = "<input>") -> EvaluationResult:
    """
    Evaluate an arithmetic expression without raising.

    Returns:
        EvaluationResult with `value` set on success, or `error` set to the
        stage-tagged message on failure
    """
    try:
        return EvaluationResult(value=calculate(text, filename))
    except CalculationError as e:
        logger.debug("Rejected %r: %s", text, e)
        return EvaluationResult(error=str(e))
