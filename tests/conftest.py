"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from roman_numerals.encoder import RomanEncoder
from roman_numerals.parser import NumeralParser
from roman_numerals.validator import NumeralValidator


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def validator():
    """Create a validator with the default Milhar separator."""
    return NumeralValidator()


@pytest.fixture
def encoder():
    """Create a Roman encoder."""
    return RomanEncoder()


@pytest.fixture
def parser(validator, encoder):
    """Create a parser sharing the validator and encoder fixtures."""
    return NumeralParser(validator=validator, encoder=encoder)


@pytest.fixture
def dot_parser():
    """Create a parser that groups Milhar numerals with '.' instead of '_'."""
    return NumeralParser(validator=NumeralValidator(separator="."))


# ============================================================================
# Range Fixtures
# ============================================================================


@pytest.fixture(scope="session")
def all_numerals():
    """Every Roman numeral in range, indexed by value."""
    encoder = RomanEncoder()
    return {n: encoder.encode(n) for n in range(1, 4000)}
