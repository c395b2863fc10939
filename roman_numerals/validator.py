"""
Validation of Roman and Milhar numeral strings.
"""

import re
from typing import Optional

from .numerals import (
    MILHAR_SEPARATOR,
    REPEATABLE_NUMERALS,
    SIMPLE_NUMERALS,
    SINGLE_NUMERALS,
)


def _interleaving_pattern() -> str:
    """Build the alternation of illegal three-symbol sequences."""
    sequences = ["IXI", "XCX", "CMC"]
    for low, high in zip(SIMPLE_NUMERALS, SIMPLE_NUMERALS[1:]):
        sequences.append(f"{low}{high}{low}")  # IVI
        sequences.append(f"{high}{low}{high}")  # VIV
    return "|".join(sequences)


class NumeralValidator:
    """
    Decides whether strings are canonical Roman or Milhar numerals.

    Roman numerals are compared case-insensitively, so "VI", "vI", "Vi"
    and "vi" are all accepted. A Milhar numeral is a sequence of Roman
    numerals joined by a one-character group separator.
    """

    SYMBOLS = "".join(SIMPLE_NUMERALS)

    PATTERNS = {
        # ASCII only, so that e.g. a dotless i is not taken for I
        "characters": re.compile(rf"[{SYMBOLS}]+", re.IGNORECASE | re.ASCII),
        "repetition": re.compile(
            rf"([{''.join(REPEATABLE_NUMERALS)}])\1{{3,}}|([{''.join(SINGLE_NUMERALS)}])\2+"
        ),
        "interleaving": re.compile(_interleaving_pattern()),
        # Largest-first greedy form: thousands, hundreds, tens, units
        "canonical": re.compile(r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})"),
    }

    def __init__(self, separator: str = MILHAR_SEPARATOR):
        """
        Initialize the validator.

        Args:
            separator: Single character joining the groups of a Milhar numeral.

        Raises:
            ValueError: If the separator is not a single non-numeral character.
        """
        if not isinstance(separator, str) or len(separator) != 1:
            raise ValueError(f"Milhar separator must be a single character, got {separator!r}")
        if separator.upper() in self.SYMBOLS:
            raise ValueError(f"Milhar separator cannot be a numeral symbol, got {separator!r}")
        self.separator = separator
        self._milhar_characters = re.compile(
            rf"[{self.SYMBOLS}{re.escape(separator)}]+", re.IGNORECASE | re.ASCII
        )

    def roman_errors(self, text: str) -> list[str]:
        """
        List the reasons a string is not a canonical Roman numeral.

        Args:
            text: Candidate numeral, any case.

        Returns:
            List of problems (empty if the string is valid).
        """
        if not isinstance(text, str):
            return [f"Expected a string, got {type(text).__name__}"]
        if not text:
            return ["Empty numeral"]

        if not self.PATTERNS["characters"].fullmatch(text):
            return [f"Characters outside {self.SYMBOLS} in {text!r}"]

        upper = text.upper()

        errors = []
        match = self.PATTERNS["repetition"].search(upper)
        if match:
            errors.append(f"Illegal repetition {match.group(0)!r}")

        match = self.PATTERNS["interleaving"].search(upper)
        if match:
            errors.append(f"Illegal interleaving {match.group(0)!r}")

        if not errors and not self.PATTERNS["canonical"].fullmatch(upper):
            errors.append(f"{text!r} is not in canonical largest-first order")

        return errors

    def is_roman(self, text: str) -> bool:
        """Check if a string is a valid canonical Roman numeral."""
        return not self.roman_errors(text)

    def split_milhar(self, text: str) -> list[str]:
        """Split a Milhar numeral into its Roman groups."""
        return text.split(self.separator)

    def milhar_errors(self, text: str) -> list[str]:
        """
        List the reasons a string is not a valid Milhar numeral.

        Every group is checked on its own, so a leading, trailing or
        doubled separator produces an empty-group error.

        Args:
            text: Candidate Milhar numeral.

        Returns:
            List of problems (empty if the string is valid).
        """
        if not isinstance(text, str):
            return [f"Expected a string, got {type(text).__name__}"]
        if not self._milhar_characters.fullmatch(text):
            return [f"Characters outside {self.SYMBOLS}{self.separator} in {text!r}"]

        errors = []
        for position, group in enumerate(self.split_milhar(text), start=1):
            for problem in self.roman_errors(group):
                errors.append(f"Group {position}: {problem}")
        return errors

    def is_milhar(self, text: str) -> bool:
        """Check if a string is a valid Milhar numeral."""
        return not self.milhar_errors(text)

    def first_error(self, text: str, milhar: bool = False) -> Optional[str]:
        """Return the first validation problem, or None if the string is valid."""
        errors = self.milhar_errors(text) if milhar else self.roman_errors(text)
        return errors[0] if errors else None
