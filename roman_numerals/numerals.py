"""
Numeral symbol tables shared by the validator, parser and encoder.
"""

from enum import Enum
from types import MappingProxyType


class NumeralError(ValueError):
    """Base class for every numeral conversion failure."""
    pass


class NumeralKind(Enum):
    """Notations understood by the codec."""
    ARABIC = "arabic"
    ROMAN = "roman"
    MILHAR = "milhar"


# Ascending order matters: adjacent entries form the (low, high) pairs
# checked for illegal interleavings.
SIMPLE_NUMERALS = ("I", "V", "X", "L", "C", "D", "M")
COMPLEX_NUMERALS = ("IV", "IX", "XL", "XC", "CD", "CM")

# Symbols that may repeat up to three times; the rest may not repeat at all
REPEATABLE_NUMERALS = ("I", "X", "C", "M")
SINGLE_NUMERALS = ("V", "L", "D")

ROMAN_TO_ARABIC = MappingProxyType(
    dict(
        zip(
            SIMPLE_NUMERALS + COMPLEX_NUMERALS,
            (1, 5, 10, 50, 100, 500, 1000, 4, 9, 40, 90, 400, 900),
        )
    )
)
ARABIC_TO_ROMAN = MappingProxyType({value: symbol for symbol, value in ROMAN_TO_ARABIC.items()})

# 1000, 900, 500, ... 4, 1
DESCENDING_VALUES = tuple(sorted(ARABIC_TO_ROMAN, reverse=True))

# Complex pairs first so "IV" is consumed before "I"
PREFIX_ORDER = COMPLEX_NUMERALS + SIMPLE_NUMERALS

MIN_ROMAN = 1
MAX_ROMAN = 3999

MILHAR_SEPARATOR = "_"
MILHAR_FACTOR = 1000
