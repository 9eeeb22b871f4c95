import sys

import pytest

from prime_catacombs.utils import (
    CatacombsError,
    InvalidHammingDistanceError,
    InvalidNumberError,
    parse_number,
    validate_hamming_distance,
)


class TestParseNumber:
    """Test suite for parse_number"""

    def test_plain(self):
        """Digits parse as base 10"""
        assert parse_number("13") == 13
        assert parse_number("007") == 7

    def test_plus_and_whitespace(self):
        """A leading plus and surrounding whitespace are accepted"""
        assert parse_number(" +29\n") == 29

    def test_huge(self):
        """Arbitrarily long numbers parse"""
        assert parse_number("1" + "0" * 60) == 10**60

    def test_over_int_digit_limit(self):
        """Without a lifted limit, overlong input is still an InvalidNumberError"""
        previous = sys.get_int_max_str_digits()
        sys.set_int_max_str_digits(4300)
        try:
            with pytest.raises(InvalidNumberError, match="too many digits"):
                parse_number("1" * 5000)
        finally:
            sys.set_int_max_str_digits(previous)

    def test_underscores_rejected(self):
        """Python literal separators are not base-10 text"""
        with pytest.raises(InvalidNumberError):
            parse_number("1_000")

    def test_non_string(self):
        """Only text is accepted"""
        with pytest.raises(InvalidNumberError, match="Expected base-10 text"):
            parse_number(13)

    def test_error_hierarchy(self):
        """Input errors are both CatacombsError and ValueError"""
        with pytest.raises(CatacombsError):
            parse_number("x")
        with pytest.raises(ValueError):
            parse_number("x")


class TestValidateHammingDistance:
    """Test suite for validate_hamming_distance"""

    def test_positive(self):
        """Positive distances pass through"""
        assert validate_hamming_distance(3) == 3

    @pytest.mark.parametrize("distance", [0, -1])
    def test_not_positive(self, distance):
        """Zero and negative distances are rejected"""
        with pytest.raises(InvalidHammingDistanceError):
            validate_hamming_distance(distance)
