# Test fixtures
from .sample_numerals import (
    KNOWN_NUMERALS,
    BAD_CHARACTERS,
    BAD_REPETITION,
    BAD_INTERLEAVING,
    NON_CANONICAL,
    INVALID_NUMERALS,
    MILHAR_NUMERALS,
    INVALID_MILHAR,
)

__all__ = [
    "KNOWN_NUMERALS",
    "BAD_CHARACTERS",
    "BAD_REPETITION",
    "BAD_INTERLEAVING",
    "NON_CANONICAL",
    "INVALID_NUMERALS",
    "MILHAR_NUMERALS",
    "INVALID_MILHAR",
]
