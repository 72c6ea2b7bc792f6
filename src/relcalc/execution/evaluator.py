"""Expression evaluator: expression tree → integer result.

Relations evaluate to 1 when they hold and 0 otherwise. A tree containing an
absent operand (None) cannot be evaluated and raises EvaluationError; missing
operands are never treated as 0.

Trees are walked with an explicit stack, so long operator chains are not
limited by the interpreter's recursion limit.
"""

from enum import Enum, auto
from typing import Callable, List, Optional, Tuple, TypeVar

from .operators import OperatorKind, execute_operator
from .types import BinaryOp, Expr, Integer, Parenthesized

T = TypeVar("T")


class EvaluationErrorKind(Enum):
    """Kinds of evaluation failure"""
    MISSING_OPERAND = auto()


class EvaluationError(Exception):
    """Raised when an expression tree cannot be evaluated or rendered."""

    def __init__(self, message: str, kind: EvaluationErrorKind = EvaluationErrorKind.MISSING_OPERAND):
        self.kind = kind
        self.message = message
        super().__init__(message)


def require_node(node: Optional[Expr], context: str) -> Expr:
    """Return ``node`` or raise if it is an absent operand.

    Args:
        node: Child slot to check.
        context: Description of the slot for the error message
            (e.g. "right operand of '+'").

    Raises:
        EvaluationError: If node is None.
    """
    if node is None:
        raise EvaluationError(f"Missing {context}")
    return node


def fold_tree(
    expr: Optional[Expr],
    on_integer: Callable[[int], T],
    on_parenthesized: Callable[[T], T],
    on_binary: Callable[[T, OperatorKind, T], T],
) -> T:
    """Combine a tree bottom-up without recursing on the call stack.

    Children are folded before their parent; the left operand of a
    BinaryOp before the right.

    Raises:
        EvaluationError: If any operand in the tree is absent.
    """
    results: List[T] = []
    # (node, children already folded)
    stack: List[Tuple[Expr, bool]] = [(require_node(expr, "expression"), False)]

    while stack:
        node, folded = stack.pop()

        if isinstance(node, Integer):
            results.append(on_integer(node.value))

        elif isinstance(node, Parenthesized):
            if folded:
                results.append(on_parenthesized(results.pop()))
            else:
                stack.append((node, True))
                stack.append((require_node(node.expression, "expression inside parentheses"), False))

        elif isinstance(node, BinaryOp):
            if folded:
                right = results.pop()
                left = results.pop()
                results.append(on_binary(left, node.operator, right))
            else:
                left_node = require_node(node.left, f"left operand of '{node.symbol}'")
                right_node = require_node(node.right, f"right operand of '{node.symbol}'")
                stack.append((node, True))
                stack.append((right_node, False))
                stack.append((left_node, False))

        else:
            raise TypeError(f"Unknown expression type: {type(node).__name__}")

    return results.pop()


def evaluate(expr: Optional[Expr]) -> int:
    """Evaluate an expression tree.

    Args:
        expr: Root node of a parsed expression.

    Returns:
        int - the computed value; relations give 1 or 0.

    Raises:
        EvaluationError: If any operand in the tree is absent.

    Examples:
        >>> from relcalc.execution.parser import parse_expression
        >>> evaluate(parse_expression("3 + 4 * 2"))
        11
        >>> evaluate(parse_expression("10 > 20"))
        0
    """
    return fold_tree(
        expr,
        on_integer=lambda value: value,
        on_parenthesized=lambda value: value,
        on_binary=lambda left, kind, right: execute_operator(kind, left, right),
    )
