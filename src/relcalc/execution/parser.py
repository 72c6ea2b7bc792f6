"""Expression parser: string → expression tree

Parses single-line integer expressions like:
- "3 + 4 * 2"
- "(1 + 2) * 3"
- "5 < 10"
- "-3 - -4 = (0 - 7)"

The parser works directly on the character sequence (no separate token
stream). Spaces are stripped first; every grammar rule then reads from an
immutable string through an integer cursor.

Grammar (lowest precedence first):
    relation := term ( ('<' | '>' | '=') term )?
    term     := factor ( ('+' | '-') factor )*
    factor   := primary ( '*' primary )*
    primary  := ['-'] digit+ | '(' relation ')'
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional

from .operators import Operator, PrecedenceLevel, get_operator_by_symbol
from .types import BinaryOp, Expr, Integer, Parenthesized

logger = logging.getLogger(__name__)

# Each parenthesis level costs a handful of parser frames on the call stack
MAX_NESTING_DEPTH = 100


class ParseErrorKind(Enum):
    """Kinds of parse failure"""
    EMPTY_OR_UNEXPECTED_PRIMARY = auto()
    SIGN_WITHOUT_DIGITS = auto()
    UNMATCHED_PARENTHESIS = auto()
    NESTING_TOO_DEEP = auto()


class ParseError(Exception):
    """Raised when parser encounters invalid syntax

    Attributes:
        kind: Which rule failed and why
        position: Offset into the space-stripped input
        text: Unparsed input starting at the failure
    """

    def __init__(self, kind: ParseErrorKind, message: str, position: int, text: str):
        self.kind = kind
        self.message = message
        self.position = position
        self.text = text
        super().__init__(f"{message} at position {position}")


def remove_spaces(text: str) -> str:
    """Drop ASCII spaces, keeping every other character in order."""
    return text.replace(" ", "")


def _is_digit(ch: Optional[str]) -> bool:
    return ch is not None and "0" <= ch <= "9"


def _match_parentheses(text: str) -> Dict[int, int]:
    """Map each '(' index to the index of its closing ')' in one pass.

    Unclosed '(' are left out; stray ')' are ignored.
    """
    closing: Dict[int, int] = {}
    open_stack: List[int] = []
    for index, ch in enumerate(text):
        if ch == "(":
            open_stack.append(index)
        elif ch == ")" and open_stack:
            closing[open_stack.pop()] = index
    return closing


class Parser:
    """Parse a space-stripped expression using recursive descent"""

    def __init__(self, text: str, max_depth: int = MAX_NESTING_DEPTH):
        self.text = text
        self.max_depth = max_depth
        self.pos = 0
        # Exclusive read limit; narrowed to the closing ')' while inside parentheses
        self.end = len(text)
        self.depth = 0
        self.warnings: List[str] = []
        self._closing = _match_parentheses(text)
        self.current_char: Optional[str] = text[0] if text else None

    @property
    def remainder(self) -> str:
        """Input not consumed so far"""
        return self.text[self.pos:self.end]

    def advance(self, count: int = 1) -> None:
        """Move the cursor forward"""
        self._seek(self.pos + count)

    def _seek(self, pos: int) -> None:
        self.pos = pos
        if self.pos >= self.end:
            self.current_char = None
        else:
            self.current_char = self.text[self.pos]

    def error(self, kind: ParseErrorKind, message: str, start: Optional[int] = None) -> ParseError:
        pos = self.pos if start is None else start
        return ParseError(kind, message, pos, self.text[pos:self.end])

    def parse(self) -> Expr:
        """Parse a full relation; leftover input is reported, not rejected"""
        expr = self.parse_relation()
        if self.remainder:
            logger.warning("Not parsed %s", self.remainder)
            self.warnings.append(f"Not parsed {self.remainder}")
        return expr

    def _match(self, level: PrecedenceLevel) -> Optional[Operator]:
        op = get_operator_by_symbol(self.current_char)
        if op is not None and op.level == level:
            return op
        return None

    def parse_relation(self) -> Expr:
        """Parse relation (lowest precedence)

        relation := term (('<' | '>' | '=') term)?

        At most one comparison is consumed; `1<2<3` leaves `<3` unparsed.
        """
        left = self.parse_term()

        op = self._match(PrecedenceLevel.RELATION)
        if op is None:
            return left
        self.advance()
        right = self.parse_term()
        return BinaryOp(left, op.kind, right)

    def parse_term(self) -> Expr:
        """Parse additive chain

        term := factor (('+' | '-') factor)*
        """
        left = self.parse_factor()

        while True:
            op = self._match(PrecedenceLevel.TERM)
            if op is None:
                break
            self.advance()
            right = self.parse_factor()
            left = BinaryOp(left, op.kind, right)

        return left

    def parse_factor(self) -> Expr:
        """Parse multiplicative chain

        factor := primary ('*' primary)*
        """
        left = self.parse_primary()

        while True:
            op = self._match(PrecedenceLevel.FACTOR)
            if op is None:
                break
            self.advance()
            right = self.parse_primary()
            left = BinaryOp(left, op.kind, right)

        return left

    def parse_primary(self) -> Expr:
        """Parse integer literal or parenthesized relation

        primary := ['-'] digit+ | '(' relation ')'
        """
        if self.current_char is None:
            raise self.error(
                ParseErrorKind.EMPTY_OR_UNEXPECTED_PRIMARY,
                "Expected primary, but input is empty",
            )

        if self.current_char == "-" or _is_digit(self.current_char):
            return self._read_integer()

        if self.current_char == "(":
            return self._read_parenthesized()

        raise self.error(
            ParseErrorKind.EMPTY_OR_UNEXPECTED_PRIMARY,
            f"Expected primary, found '{self.remainder}'",
        )

    def _read_integer(self) -> Integer:
        start = self.pos
        negative = self.current_char == "-"
        if negative:
            self.advance()

        digits_start = self.pos
        while _is_digit(self.current_char):
            self.advance()

        if self.pos == digits_start:
            raise self.error(
                ParseErrorKind.SIGN_WITHOUT_DIGITS,
                f"Expected negative integer, found only sign '{self.text[start:self.end]}'",
                start=start,
            )

        value = int(self.text[digits_start:self.pos])
        return Integer(-value if negative else value)

    def _read_parenthesized(self) -> Parenthesized:
        start = self.pos
        close = self._closing.get(start)
        if close is None:
            raise self.error(
                ParseErrorKind.UNMATCHED_PARENTHESIS,
                f"No closing parenthesis for '{self.text[start:self.end]}'",
                start=start,
            )
        if self.depth >= self.max_depth:
            raise self.error(
                ParseErrorKind.NESTING_TOO_DEEP,
                f"Parentheses nested deeper than {self.max_depth} levels",
                start=start,
            )

        outer_end = self.end
        self.depth += 1
        self.end = close
        self.advance()
        expression = self.parse_relation()
        if self.remainder:
            logger.warning("Not parsed %s inside parentheses", self.remainder)
            self.warnings.append(f"Not parsed {self.remainder} inside parentheses")
        self.depth -= 1
        self.end = outer_end
        self._seek(close + 1)
        return Parenthesized(expression)


@dataclass
class ParseResult:
    """Outcome of parsing one input line"""
    success: bool
    expression: Optional[Expr] = None
    error: Optional[ParseError] = None
    remainder: str = ""
    warnings: List[str] = field(default_factory=list)


def parse_expression(raw: str) -> Expr:
    """Parse an input line into an expression tree

    Args:
        raw: Expression text (e.g., "(1 + 2) * 3")

    Returns:
        Expression tree root node

    Raises:
        ParseError: If parsing fails

    Examples:
        >>> expr = parse_expression("3 + 4 * 2")
        >>> expr.symbol
        '+'
    """
    return Parser(remove_spaces(raw or "")).parse()


def parse(raw: str) -> ParseResult:
    """Parse an input line, returning failures as values instead of raising"""
    parser = Parser(remove_spaces(raw or ""))
    try:
        expression = parser.parse()
    except ParseError as e:
        logger.info("Parse failed (%s): %s", e.kind.name, e)
        return ParseResult(success=False, error=e, warnings=parser.warnings)
    return ParseResult(
        success=True,
        expression=expression,
        remainder=parser.remainder,
        warnings=parser.warnings,
    )
