"""
Domain models and value objects.

Contains the ExactDecimal value type used to derive plural operands.
"""

from src.plurals.domain.exact_decimal import DIGITS_PATTERN, ExactDecimal

__all__ = [
    "DIGITS_PATTERN",
    "ExactDecimal",
]
