"""
Roman Numerals - Conversion between Arabic integers and Roman algarisms

Supports conventional Roman numerals (1 to 3999) and Milhar Romans, a
variation where an underscore after a group multiplies it by 1,000:
IV_V = 4,005. Milhar notation extends the range to
3999 x 1000 + 3999 = 4,002,999. Numerals are case-insensitive.
"""

from .core import (
    int2roman,
    int_to_roman,
    is_milhar,
    is_roman,
    ismilhar,
    ismroman,
    isroman,
    milhar2int,
    milhar_to_int,
    mroman2int,
    roman,
    roman2int,
    roman_to_int,
)
from .encoder import NumeralRangeError, RomanEncoder
from .numerals import NumeralError, NumeralKind
from .parser import NumeralParseError, NumeralParser
from .validator import NumeralValidator

__version__ = "3.3.0"

__all__ = [
    "is_roman",
    "int_to_roman",
    "roman_to_int",
    "is_milhar",
    "milhar_to_int",
    "isroman",
    "int2roman",
    "roman2int",
    "ismilhar",
    "milhar2int",
    "ismroman",
    "mroman2int",
    "roman",
    "NumeralError",
    "NumeralRangeError",
    "NumeralParseError",
    "NumeralKind",
    "NumeralValidator",
    "NumeralParser",
    "RomanEncoder",
]
