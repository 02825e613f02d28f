"""
Plural operand calculation.

Derives the CLDR plural operands (n, i, f, t, v, w, e) from a numeric literal.
"""

from src.plurals.operands.calculator import (
    Numeric,
    PluralOperands,
    calculate_operands,
    operand_e,
    operand_f,
    operand_i,
    operand_n,
    operand_t,
    operand_v,
    operand_w,
)

__all__ = [
    # Types
    "Numeric",
    "PluralOperands",
    # Single operands
    "operand_n",
    "operand_i",
    "operand_f",
    "operand_t",
    "operand_v",
    "operand_w",
    "operand_e",
    # All operands
    "calculate_operands",
]
