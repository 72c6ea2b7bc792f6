"""Tests for expression evaluator (expression tree → integer result)"""

import pytest

from relcalc.execution.evaluator import EvaluationError, EvaluationErrorKind, evaluate
from relcalc.execution.operators import OperatorKind
from relcalc.execution.parser import parse_expression
from relcalc.execution.types import BinaryOp, Integer, Parenthesized
from .fixtures import ALL_CASES


class TestExpressionEvaluator:
    """Test evaluation of parsed expressions"""

    @pytest.mark.parametrize("text,rendered,value", ALL_CASES)
    def test_cases(self, text, rendered, value):
        assert evaluate(parse_expression(text)) == value

    def test_integer(self):
        assert evaluate(Integer(-12)) == -12

    def test_parenthesized(self):
        assert evaluate(Parenthesized(Integer(4))) == 4

    @pytest.mark.parametrize("text,expected", [
        ("1<2", 1),
        ("2<1", 0),
        ("2<2", 0),
        ("3>2", 1),
        ("2>3", 0),
        ("4=4", 1),
        ("4=5", 0),
    ])
    def test_relations_yield_one_or_zero(self, text, expected):
        assert evaluate(parse_expression(text)) == expected

    def test_chained_relation_uses_first_comparison(self):
        """Test: 1<2<3 evaluates as 1<2"""
        assert evaluate(parse_expression("1<2<3")) == 1

    def test_large_product_does_not_overflow(self):
        assert evaluate(parse_expression("99999999999*99999999999")) == 9999999999800000000001


class TestMissingOperands:
    """Absent nodes fail fast instead of defaulting to 0"""

    def test_missing_root(self):
        with pytest.raises(EvaluationError) as exc_info:
            evaluate(None)
        assert exc_info.value.kind == EvaluationErrorKind.MISSING_OPERAND
        assert str(exc_info.value) == "Missing expression"

    def test_missing_right_operand(self):
        expr = BinaryOp(Integer(1), OperatorKind.PLUS, None)
        with pytest.raises(EvaluationError) as exc_info:
            evaluate(expr)
        assert str(exc_info.value) == "Missing right operand of '+'"

    def test_missing_left_operand(self):
        expr = BinaryOp(None, OperatorKind.LESS, Integer(1))
        with pytest.raises(EvaluationError) as exc_info:
            evaluate(expr)
        assert str(exc_info.value) == "Missing left operand of '<'"

    def test_missing_operand_deep_in_tree(self):
        expr = BinaryOp(
            Parenthesized(BinaryOp(None, OperatorKind.MULT, Integer(2))),
            OperatorKind.EQUAL,
            Integer(0),
        )
        with pytest.raises(EvaluationError, match=r"left operand of '\*'"):
            evaluate(expr)

    def test_empty_parentheses_node(self):
        with pytest.raises(EvaluationError, match="inside parentheses"):
            evaluate(Parenthesized(None))


class TestLargeTrees:
    """Evaluation uses an explicit stack, not the call stack"""

    def test_long_sum(self):
        assert evaluate(parse_expression("+".join(["1"] * 5000))) == 5000

    def test_long_mixed_chain(self):
        text = "2*" * 3000 + "1" + "-1" * 3000
        assert evaluate(parse_expression(text)) == 2 ** 3000 - 3000

    def test_deeply_nested_hand_built_tree(self):
        expr = Integer(7)
        for _ in range(10000):
            expr = Parenthesized(expr)
        assert evaluate(expr) == 7

    def test_missing_operand_in_long_chain(self):
        expr = Integer(1)
        for _ in range(3000):
            expr = BinaryOp(expr, OperatorKind.PLUS, Integer(1))
        expr = BinaryOp(expr, OperatorKind.PLUS, None)
        with pytest.raises(EvaluationError, match=r"right operand of '\+'"):
            evaluate(expr)
