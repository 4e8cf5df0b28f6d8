"""
Domain models and value objects.

Contains fundamental domain entities: NumeralValue, Notation, Operator, errors.
"""

from src.core.domain.errors import (
    MSG_DIVISION_BY_ZERO,
    MSG_INCORRECT_FORMAT,
    MSG_INPUT_MISSING,
    MSG_INVALID_NUMERAL,
    MSG_INVALID_OPERATOR,
    MSG_NOTATION_MISMATCH,
    MSG_ROMAN_RANGE,
    CalculatorError,
    DivisionByZeroError,
    EquationParseError,
    FormatError,
    InputMissingError,
    NotationMismatchError,
    NumeralParseError,
    OperandParseError,
    OperandPosition,
    OperatorParseError,
    RomanRangeViolation,
)
from src.core.domain.numeral import (
    ARABIC_NUMERALS,
    NUMERAL_MAX,
    NUMERAL_MIN,
    ROMAN_NUMERALS,
    Notation,
    NumeralValue,
)
from src.core.domain.operator import Operator

__all__ = [
    # Errors module
    "MSG_INPUT_MISSING",
    "MSG_INCORRECT_FORMAT",
    "MSG_INVALID_NUMERAL",
    "MSG_INVALID_OPERATOR",
    "MSG_NOTATION_MISMATCH",
    "MSG_DIVISION_BY_ZERO",
    "MSG_ROMAN_RANGE",
    "CalculatorError",
    "InputMissingError",
    "FormatError",
    "NumeralParseError",
    "OperandParseError",
    "OperandPosition",
    "OperatorParseError",
    "NotationMismatchError",
    "EquationParseError",
    "DivisionByZeroError",
    "RomanRangeViolation",
    # Numeral model
    "NUMERAL_MIN",
    "NUMERAL_MAX",
    "ARABIC_NUMERALS",
    "ROMAN_NUMERALS",
    "Notation",
    "NumeralValue",
    # Operator
    "Operator",
]
