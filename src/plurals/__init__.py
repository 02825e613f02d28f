"""
CLDR plural operands from numeric literals.

Converts a numeric literal, exactly as typed, into the operands
(n, i, f, t, v, w, e) consumed by CLDR plural rules. No value ever
passes through binary floating point before an operand is derived.
"""

from src.plurals.domain import ExactDecimal
from src.plurals.literal import (
    InvalidNumericLiteral,
    LiteralParser,
    LiteralParserConfig,
    LiteralParts,
    parse_literal,
)
from src.plurals.operands import PluralOperands, calculate_operands

__all__ = [
    "ExactDecimal",
    "InvalidNumericLiteral",
    "LiteralParser",
    "LiteralParserConfig",
    "LiteralParts",
    "parse_literal",
    "PluralOperands",
    "calculate_operands",
]
