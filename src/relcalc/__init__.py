"""relcalc: integer arithmetic/relational expression calculator."""

__version__ = "0.1.0"
