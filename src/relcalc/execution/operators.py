"""Operator registry for binary expression nodes.

Every binary operator of the expression grammar is registered here with its
symbol, the grammar layer it belongs to and an execute function computing the
integer result from the two evaluated operands.

Operators are organized by precedence level (lowest binding first):
- Relation: comparisons yielding 1 or 0 (<, >, =)
- Term: additive operators (+, -)
- Factor: multiplicative operator (*)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional


class PrecedenceLevel(Enum):
    """Grammar layer an operator is parsed at"""
    RELATION = 1
    TERM = 2
    FACTOR = 3


class OperatorKind(Enum):
    """Tag carried by every binary node"""
    LESS = "less"
    MORE = "more"
    EQUAL = "equal"
    PLUS = "plus"
    MINUS = "minus"
    MULT = "mult"


@dataclass(frozen=True)
class Operator:
    """Definition of a binary operator.

    Attributes:
        kind: Tag stored on BinaryOp nodes
        symbol: Source character, also used when rendering
        level: Grammar layer the operator is parsed at
        execute: Function that takes both operands and returns the result
        description: Explanation of what the operator does
    """
    kind: OperatorKind
    symbol: str
    level: PrecedenceLevel
    execute: Callable[[int, int], int]
    description: str


# =============================================================================
# Operator Implementations
# =============================================================================

def _less(left: int, right: int) -> int:
    """Less than: 1 if a < b else 0"""
    return 1 if left < right else 0


def _more(left: int, right: int) -> int:
    """Greater than: 1 if a > b else 0"""
    return 1 if left > right else 0


def _equal(left: int, right: int) -> int:
    """Equality: 1 if a == b else 0"""
    return 1 if left == right else 0


def _plus(left: int, right: int) -> int:
    return left + right


def _minus(left: int, right: int) -> int:
    return left - right


def _mult(left: int, right: int) -> int:
    return left * right


# =============================================================================
# Operator Registry
# =============================================================================

_OPERATOR_REGISTRY: Dict[OperatorKind, Operator] = {}
_SYMBOL_INDEX: Dict[str, Operator] = {}


def _register(op: Operator) -> None:
    """Register an operator in the registry."""
    _OPERATOR_REGISTRY[op.kind] = op
    _SYMBOL_INDEX[op.symbol] = op


# Relation operators
_register(Operator(OperatorKind.LESS, "<", PrecedenceLevel.RELATION, _less, "Returns 1 if left is less than right, else 0"))
_register(Operator(OperatorKind.MORE, ">", PrecedenceLevel.RELATION, _more, "Returns 1 if left is greater than right, else 0"))
_register(Operator(OperatorKind.EQUAL, "=", PrecedenceLevel.RELATION, _equal, "Returns 1 if both operands are equal, else 0"))

# Term operators
_register(Operator(OperatorKind.PLUS, "+", PrecedenceLevel.TERM, _plus, "Returns the sum of both operands"))
_register(Operator(OperatorKind.MINUS, "-", PrecedenceLevel.TERM, _minus, "Returns left minus right"))

# Factor operators
_register(Operator(OperatorKind.MULT, "*", PrecedenceLevel.FACTOR, _mult, "Returns the product of both operands"))


# =============================================================================
# Public API
# =============================================================================

def get_operator(kind: OperatorKind) -> Operator:
    """Get the operator registered for a node tag.

    Raises:
        KeyError: If the kind is not registered
    """
    return _OPERATOR_REGISTRY[kind]


def get_operator_by_symbol(symbol: Optional[str]) -> Optional[Operator]:
    """Look up an operator by its source character.

    Returns:
        Operator if the character is an operator symbol, None otherwise.
    """
    if symbol is None:
        return None
    return _SYMBOL_INDEX.get(symbol)


def operators_for_level(level: PrecedenceLevel) -> List[Operator]:
    """Get the operators parsed at a grammar layer."""
    return [op for op in _OPERATOR_REGISTRY.values() if op.level == level]


def get_all_operators() -> List[Operator]:
    """Get all registered operators."""
    return list(_OPERATOR_REGISTRY.values())


def execute_operator(kind: OperatorKind, left: int, right: int) -> int:
    """Apply the operator registered for ``kind`` to two evaluated operands."""
    return get_operator(kind).execute(left, right)
