"""Expression engine - parser, evaluator, renderer"""

from .parser import parse, parse_expression, remove_spaces, Parser, ParseResult, ParseError, ParseErrorKind
from .evaluator import evaluate, EvaluationError, EvaluationErrorKind
from .renderer import render
from .calculator import calculate, CalculationResult
from .types import Expr, BinaryOp, Integer, Parenthesized
from .operators import Operator, OperatorKind, PrecedenceLevel

__all__ = [
    "parse",
    "parse_expression",
    "remove_spaces",
    "evaluate",
    "render",
    "calculate",
    "Parser",
    "ParseResult",
    "CalculationResult",
    "Expr",
    "BinaryOp",
    "Integer",
    "Parenthesized",
    "Operator",
    "OperatorKind",
    "PrecedenceLevel",
    "ParseError",
    "ParseErrorKind",
    "EvaluationError",
    "EvaluationErrorKind",
]
