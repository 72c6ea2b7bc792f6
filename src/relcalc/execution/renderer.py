"""Expression renderer: expression tree → canonical infix string.

Operators are written with one space on each side. Parentheses appear exactly
where the source had them; none are inserted for precedence.
"""

from typing import Optional

from .evaluator import fold_tree
from .operators import get_operator
from .types import Expr


def render(expr: Optional[Expr]) -> str:
    """Render an expression tree as text.

    Raises:
        EvaluationError: If any operand in the tree is absent.

    Examples:
        >>> from relcalc.execution.parser import parse_expression
        >>> render(parse_expression("(1+2)*3"))
        '(1 + 2) * 3'
    """
    return fold_tree(
        expr,
        on_integer=str,
        on_parenthesized=lambda inner: "(" + inner + ")",
        on_binary=lambda left, kind, right: f"{left} {get_operator(kind).symbol} {right}",
    )
