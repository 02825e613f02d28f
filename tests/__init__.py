"""
Test suite for cldr-plural-operands

Contains:
- tests/unit/          : Unit tests for parser, ExactDecimal, operands
"""
