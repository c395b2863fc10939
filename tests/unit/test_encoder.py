"""
Unit tests for the encoder module.
"""

import pytest

from roman_numerals.encoder import NumeralRangeError, RomanEncoder
from roman_numerals.numerals import NumeralError
from tests.fixtures import KNOWN_NUMERALS


class TestRomanEncoder:
    """Tests for RomanEncoder class."""

    @pytest.mark.parametrize("numeral,value", KNOWN_NUMERALS)
    def test_encode_known_values(self, encoder, numeral, value):
        """Test encoding of known values."""
        assert encoder.encode(value) == numeral

    def test_encode_bounds(self, encoder):
        """Test the smallest and largest encodable values."""
        assert encoder.encode(1) == "I"
        assert encoder.encode(3999) == "MMMCMXCIX"

    @pytest.mark.parametrize("value", [0, -5, 4000, 10**6])
    def test_out_of_range_raises(self, encoder, value):
        """Test that values outside 1-3999 raise NumeralRangeError."""
        with pytest.raises(NumeralRangeError, match="1-3999"):
            encoder.encode(value)

    @pytest.mark.parametrize("value", [True, 2.0, "12", None])
    def test_non_integer_raises(self, encoder, value):
        """Test that non-integers are refused."""
        with pytest.raises(NumeralRangeError):
            encoder.encode(value)

    def test_range_error_is_value_error(self):
        """Test the exception hierarchy."""
        assert issubclass(NumeralRangeError, NumeralError)
        assert issubclass(NumeralRangeError, ValueError)

    def test_in_range(self, encoder):
        """Test in_range boundaries."""
        assert encoder.in_range(1)
        assert encoder.in_range(3999)
        assert not encoder.in_range(0)
        assert not encoder.in_range(4000)
        assert not encoder.in_range(False)

    def test_subclass_can_narrow_range(self):
        """Test that MIN_VALUE/MAX_VALUE are honoured."""

        class SmallEncoder(RomanEncoder):
            MAX_VALUE = 10

        encoder = SmallEncoder()
        assert encoder.encode(10) == "X"
        with pytest.raises(NumeralRangeError, match="1-10"):
            encoder.encode(11)

    def test_output_is_upper_case(self, encoder):
        """Test that encoded numerals use upper-case symbols."""
        assert encoder.encode(2444) == "MMCDXLIV"
