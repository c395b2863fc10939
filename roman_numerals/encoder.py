"""
Encoder from Arabic integers to canonical Roman numerals.
"""

import numbers

from .numerals import ARABIC_TO_ROMAN, DESCENDING_VALUES, MAX_ROMAN, MIN_ROMAN, NumeralError


class NumeralRangeError(NumeralError):
    """Raised when an integer cannot be written as a Roman numeral."""
    pass


class RomanEncoder:
    """
    Greedy largest-value-first Roman encoder.

    The output always satisfies NumeralValidator.is_roman, since the greedy
    decomposition is the canonical form.
    """

    MIN_VALUE = MIN_ROMAN
    MAX_VALUE = MAX_ROMAN

    def in_range(self, value) -> bool:
        """Check if a value is an integer the encoder accepts."""
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            return False
        return self.MIN_VALUE <= value <= self.MAX_VALUE

    def encode(self, value: int) -> str:
        """
        Convert an integer to its Roman numeral.

        Args:
            value: Integer in [MIN_VALUE, MAX_VALUE].

        Returns:
            Upper-case canonical Roman numeral.

        Raises:
            NumeralRangeError: If the value is not an integer in range.
        """
        if not self.in_range(value):
            raise NumeralRangeError(
                f"Roman numerals cover integers {self.MIN_VALUE}-{self.MAX_VALUE}, got {value!r}"
            )

        remaining = int(value)
        parts = []
        for step in DESCENDING_VALUES:
            count, remaining = divmod(remaining, step)
            parts.append(ARABIC_TO_ROMAN[step] * count)
            if remaining == 0:
                break
        return "".join(parts)
