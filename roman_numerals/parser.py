"""
Parser turning Roman and Milhar numerals back into integers.
"""

import logging
from typing import Optional

from .encoder import RomanEncoder
from .numerals import MILHAR_FACTOR, PREFIX_ORDER, ROMAN_TO_ARABIC, NumeralError
from .validator import NumeralValidator

logger = logging.getLogger(__name__)


class NumeralParseError(NumeralError):
    """Raised when a numeral string cannot be decoded."""
    pass


class NumeralParser:
    """
    Decodes Roman numerals by repeated longest-prefix matching.

    Complex pairs (IV, IX, XL, XC, CD, CM) are tried before simple symbols.
    Milhar numerals are decoded group by group: every group but the last
    is worth its value times 1000.
    """

    def __init__(
        self,
        validator: Optional[NumeralValidator] = None,
        encoder: Optional[RomanEncoder] = None,
    ):
        """
        Initialize the parser.

        Args:
            validator: Validator used before decoding (also fixes the Milhar separator).
            encoder: Encoder used to confirm canonical form after decoding.
        """
        self.validator = validator or NumeralValidator()
        self.encoder = encoder or RomanEncoder()

    @property
    def separator(self) -> str:
        return self.validator.separator

    def parse_roman(self, text: str, validate: bool = True) -> int:
        """
        Parse a Roman numeral.

        Args:
            text: Roman numeral, any case.
            validate: If False, skip the up-front validator. Non-canonical
                input is still rejected by the prefix scan.

        Returns:
            Integer value in [1, 3999].

        Raises:
            NumeralParseError: If the text is not a canonical Roman numeral.
        """
        if validate:
            problem = self.validator.first_error(text)
            if problem:
                raise NumeralParseError(problem)
        elif not isinstance(text, str) or not text or not text.isascii():
            raise NumeralParseError(f"Cannot parse {text!r} as a Roman numeral")

        numeral = text.upper()
        remaining = numeral
        total = 0
        while remaining:
            previous = total
            for symbol in PREFIX_ORDER:
                if remaining.startswith(symbol):
                    total += ROMAN_TO_ARABIC[symbol]
                    remaining = remaining[len(symbol):]
                    break
            if total <= previous:
                raise NumeralParseError(f"Unrecognised symbol at {remaining!r} in {text!r}")

        # Catches IIII, IIV and friends when validation was skipped
        if not self.encoder.in_range(total) or self.encoder.encode(total) != numeral:
            raise NumeralParseError(f"{text!r} is not the canonical form of {total}")

        return total

    def parse_milhar(self, text: str) -> int:
        """
        Parse a Milhar numeral such as "IV_VIII" (4008).

        Groups are not multiplied recursively: "L_X_XXIII" is
        50 * 1000 + 10 * 1000 + 23 = 60023.

        Raises:
            NumeralParseError: If any group is not a canonical Roman numeral.
        """
        problem = self.validator.first_error(text, milhar=True)
        if problem:
            raise NumeralParseError(problem)

        *thousands, units = self.validator.split_milhar(text)
        total = self.parse_roman(units)
        for group in thousands:
            total += MILHAR_FACTOR * self.parse_roman(group)

        logger.debug("Parsed Milhar numeral %r as %d", text, total)
        return total
