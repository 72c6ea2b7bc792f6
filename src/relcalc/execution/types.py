"""Expression tree types for parsed expressions"""

from dataclasses import dataclass
from typing import Optional

from .operators import OperatorKind, PrecedenceLevel, get_operator


class Expr:
    """Base class for all expression nodes"""
    pass


@dataclass(frozen=True)
class Integer(Expr):
    """Integer literal, possibly negative (e.g., 42, -7)"""
    value: int

    def __repr__(self) -> str:
        return f"Integer({self.value})"


@dataclass(frozen=True)
class Parenthesized(Expr):
    """Sub-expression that was written inside parentheses"""
    expression: Optional[Expr]

    def __repr__(self) -> str:
        return f"Parenthesized({self.expression!r})"


@dataclass(frozen=True)
class BinaryOp(Expr):
    """Binary operation: left operator right

    One node shape covers relations (<, >, =), terms (+, -) and factors (*);
    the operator tag decides which. A child of None is an absent operand.
    """
    left: Optional[Expr]
    operator: OperatorKind
    right: Optional[Expr]

    @property
    def symbol(self) -> str:
        return get_operator(self.operator).symbol

    @property
    def level(self) -> PrecedenceLevel:
        return get_operator(self.operator).level

    def __repr__(self) -> str:
        return f"BinaryOp({self.left!r} {self.symbol} {self.right!r})"
