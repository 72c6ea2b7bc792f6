"""Expression test cases shared across parser, renderer and evaluator tests.

Each case: (input line, canonical rendering, value)
"""

BASIC_CASES = [
    ("3+4*2", "3 + 4 * 2", 11),
    ("(1+2)*3", "(1 + 2) * 3", 9),
    ("5<10", "5 < 10", 1),
    ("10>20", "10 > 20", 0),
    ("(((1)))", "(((1)))", 1),
    ("2=2", "2 = 2", 1),
    ("7", "7", 7),
]

PRECEDENCE_CASES = [
    ("2*3+4*5", "2 * 3 + 4 * 5", 26),
    ("3-2-1", "3 - 2 - 1", 0),
    ("2*3*4", "2 * 3 * 4", 24),
    ("1+1=2", "1 + 1 = 2", 1),
    ("2*(3+4)", "2 * (3 + 4)", 14),
    ("10-(4-3)", "10 - (4 - 3)", 9),
    ("1+2*3<2*4", "1 + 2 * 3 < 2 * 4", 1),
    ("(1<2)+(3>4)", "(1 < 2) + (3 > 4)", 1),
]

NEGATIVE_CASES = [
    ("-5", "-5", -5),
    ("3--5", "3 - -5", 8),
    ("-3*-3", "-3 * -3", 9),
    ("-2+-3", "-2 + -3", -5),
    ("(-4)*2", "(-4) * 2", -8),
]

SPACING_CASES = [
    ("  3 +   4 * 2 ", "3 + 4 * 2", 11),
    ("( 1 + 2 ) * 3", "(1 + 2) * 3", 9),
    ("1 2 + 3", "12 + 3", 15),
]

ALL_CASES = BASIC_CASES + PRECEDENCE_CASES + NEGATIVE_CASES + SPACING_CASES
