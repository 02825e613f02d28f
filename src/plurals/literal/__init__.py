"""
Literal parsing.

Decomposes a raw numeric literal into sign, integer digits, fraction digits
and exponent without any floating point conversion.
"""

from src.plurals.literal.parser import (
    DEFAULT_EXPONENT_MARKERS,
    DEFAULT_MAX_EXPONENT,
    InvalidNumericLiteral,
    LiteralParser,
    LiteralParserConfig,
    LiteralParts,
    digits_to_int,
    parse_literal,
)

__all__ = [
    # Constants
    "DEFAULT_EXPONENT_MARKERS",
    "DEFAULT_MAX_EXPONENT",
    # Exceptions
    "InvalidNumericLiteral",
    # Types
    "LiteralParts",
    "LiteralParserConfig",
    "LiteralParser",
    # Functions
    "digits_to_int",
    "parse_literal",
]
