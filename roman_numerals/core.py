"""
Public conversion functions.

Validators return a bool; conversions return None when there is no
result (out-of-range integer, malformed numeral). None of these
functions raise for bad input.
"""

import functools
import logging
import warnings
from typing import Optional

from .encoder import RomanEncoder
from .numerals import NumeralError
from .parser import NumeralParser
from .validator import NumeralValidator

logger = logging.getLogger(__name__)

_validator = NumeralValidator()
_encoder = RomanEncoder()
_parser = NumeralParser(validator=_validator, encoder=_encoder)


def is_roman(text: str) -> bool:
    """Check if a string is a valid canonical Roman numeral (case-insensitive)."""
    return _validator.is_roman(text)


def int_to_roman(value: int) -> Optional[str]:
    """
    Convert an integer in [1, 3999] to a Roman numeral.

    Returns:
        The numeral, or None if the value is out of range.
    """
    try:
        return _encoder.encode(value)
    except NumeralError as e:
        logger.debug("No Roman numeral for %r: %s", value, e)
        return None


def roman_to_int(text: str) -> Optional[int]:
    """
    Convert a Roman numeral to an integer.

    Returns:
        The value, or None if the string is not a canonical Roman numeral.
    """
    try:
        return _parser.parse_roman(text)
    except NumeralError as e:
        logger.debug("Rejected Roman numeral %r: %s", text, e)
        return None


def is_milhar(text: str) -> bool:
    """Check if a string is a valid Milhar numeral, e.g. "IV_V"."""
    return _validator.is_milhar(text)


def milhar_to_int(text: str) -> Optional[int]:
    """
    Convert a Milhar numeral to an integer.

    Every group before the last separator is multiplied by 1000, so
    "IV_VIII" is 4008 and the range extends to 4,002,999.

    Returns:
        The value, or None if the string is not a valid Milhar numeral.
    """
    try:
        return _parser.parse_milhar(text)
    except NumeralError as e:
        logger.debug("Rejected Milhar numeral %r: %s", text, e)
        return None


def _deprecated(func, old_name: str):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        warnings.warn(
            f"{old_name}() is deprecated, use {func.__name__}() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return func(*args, **kwargs)

    wrapper.__name__ = old_name
    wrapper.__qualname__ = old_name
    return wrapper


# Traditional names
isroman = is_roman
int2roman = int_to_roman
roman2int = roman_to_int
ismilhar = is_milhar
milhar2int = milhar_to_int

# Old interface, to be discontinued
ismroman = _deprecated(is_milhar, "ismroman")
mroman2int = _deprecated(milhar_to_int, "mroman2int")
roman = _deprecated(int_to_roman, "roman")
