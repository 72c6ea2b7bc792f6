"""Calculation pipeline: input line → rendered expression and value

Runs the full pipeline for one line of input:
1. Strip spaces and parse into an expression tree
2. Render the tree back to canonical text
3. Evaluate the tree to an integer

Failures at any stage come back as a CalculationResult with success=False;
callers (CLI, HTTP API) decide how to surface them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .evaluator import EvaluationError, evaluate
from .parser import parse
from .renderer import render

logger = logging.getLogger(__name__)


@dataclass
class CalculationResult:
    """Result of calculating one expression"""
    success: bool
    expression: Optional[str] = None
    value: Optional[int] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    # Offset into the space-stripped input, parse errors only
    position: Optional[int] = None
    remainder: str = ""
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "expression": self.expression,
            "value": self.value,
            "error": self.error,
            "error_kind": self.error_kind,
            "position": self.position,
            "remainder": self.remainder,
            "warnings": list(self.warnings),
        }


def calculate(raw: str) -> CalculationResult:
    """Parse, render and evaluate one input line.

    Examples:
        >>> calculate("1<2<3").value
        1
        >>> calculate("1<2<3").remainder
        '<3'
    """
    parsed = parse(raw)
    if not parsed.success:
        error = parsed.error
        return CalculationResult(
            success=False,
            error=str(error),
            error_kind=error.kind.name,
            position=error.position,
            warnings=parsed.warnings,
        )

    try:
        rendered = render(parsed.expression)
        value = evaluate(parsed.expression)
    except EvaluationError as e:
        logger.error("Evaluation failed for %r: %s", raw, e)
        return CalculationResult(
            success=False,
            error=str(e),
            error_kind=e.kind.name,
            remainder=parsed.remainder,
            warnings=parsed.warnings,
        )

    logger.debug("Calculated %r -> %s = %s", raw, rendered, value)
    return CalculationResult(
        success=True,
        expression=rendered,
        value=value,
        remainder=parsed.remainder,
        warnings=parsed.warnings,
    )
