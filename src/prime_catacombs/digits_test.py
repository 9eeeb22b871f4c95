import pytest

from prime_catacombs.digits import format_digits, from_digits, to_digits, validate_base
from prime_catacombs.utils import DigitRangeError, InvalidBaseError


class TestToDigits:
    """Test suite for to_digits"""

    def test_binary_little_endian(self):
        """13 is 1101 in binary, least significant digit first"""
        assert to_digits(13, 2) == [1, 0, 1, 1]

    def test_guard_digits(self):
        """Guard digits are zeros at the most significant end"""
        assert to_digits(13, 2, guard_digits=2) == [1, 0, 1, 1, 0, 0]

    def test_zero_has_one_digit(self):
        """Zero is a single zero digit"""
        assert to_digits(0, 10) == [0]
        assert to_digits(0, 2, guard_digits=1) == [0, 0]

    def test_base_256(self):
        """Base 256 digits are bytes"""
        assert to_digits(0x0102FF, 256) == [0xFF, 0x02, 0x01]

    def test_negative_value(self):
        """Negative values are rejected"""
        with pytest.raises(ValueError, match="non-negative"):
            to_digits(-1, 10)

    def test_negative_guard_digits(self):
        """Negative guard counts are rejected"""
        with pytest.raises(ValueError, match="Guard digit count"):
            to_digits(5, 10, guard_digits=-1)

    @pytest.mark.parametrize("base", [-2, 0, 1, 257])
    def test_invalid_base(self, base):
        """Bases outside [2, 256] are rejected"""
        with pytest.raises(InvalidBaseError, match="Base must be between 2 and 256"):
            to_digits(5, base)


class TestFromDigits:
    """Test suite for from_digits"""

    def test_binary(self):
        """Little-endian binary digits rebuild 13"""
        assert from_digits([1, 0, 1, 1], 2) == 13

    def test_leading_zeros(self):
        """Most significant zeros contribute nothing"""
        assert from_digits([1, 0, 1, 1, 0, 0, 0], 2) == 13

    def test_empty(self):
        """No digits is zero"""
        assert from_digits([], 10) == 0

    def test_digit_out_of_range(self):
        """Digits must be below the base"""
        with pytest.raises(DigitRangeError, match="out of range for base 2"):
            from_digits([1, 2], 2)

    def test_round_trip(self):
        """Decoding the encoding gives the value back for any guard count"""
        values = [0, 1, 2, 13, 255, 256, 10**30 + 7, 2**200 - 1]
        for base in (2, 3, 10, 16, 255, 256):
            for value in values:
                for guard in (0, 1, 3):
                    assert from_digits(to_digits(value, base, guard), base) == value


class TestHelpers:
    """Test suite for base validation and formatting"""

    def test_validate_base_returns_base(self):
        """Valid bases pass through"""
        assert validate_base(2) == 2
        assert validate_base(256) == 256

    def test_format_small_base(self):
        """Bases up to 36 use alphanumeric digits"""
        assert format_digits([1, 0, 1, 1], 2) == "1101"
        assert format_digits(to_digits(255, 16), 16) == "ff"

    def test_format_large_base(self):
        """Larger bases use hex pairs"""
        assert format_digits([0xFF, 0x01], 256) == "01:ff"
