"""Test 01: splitting the input and converting each side to a ScaledInteger.

Learning goals:
1. Only "no slash" and "one slash" shapes are fractions
2. A decimal side becomes (digits without separator, number of decimals)
3. The 64-bit maximum is the dividing line for code 24
"""

import pytest

from conftest import print_section, print_concept, print_code_example
from fracnorm.core.decimal_converter import number_pattern, parse_scaled_integer
from fracnorm.core.splitter import split_fraction
from fracnorm.core.types import ScaledInteger
from fracnorm.foundation.constants import (
    CODE_INTEGER_TOO_LARGE,
    CODE_MALFORMED_FRACTION,
    CODE_UNPARSABLE_NUMBER,
    UINT64_MAX,
)
from fracnorm.foundation.exceptions import (
    ConfigurationError,
    FracNormError,
    FractionParseError,
    IntegerOverflowError,
)


class TestSplitFraction:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("7", ("7", "1")),
            ("3/4", ("3", "4")),
            ("35,6/12", ("35,6", "12")),
            ("not-a-number", ("not-a-number", "1")),
            (" 3 / 4 ", (" 3 ", " 4 ")),
        ],
    )
    def test_valid_shapes(self, text, expected):
        print_section("Fraction shapes")
        print_concept("No slash means the denominator is 1; sides are kept verbatim")

        parts = split_fraction(text)
        print_code_example(f"split_fraction({text!r}) -> {parts}")
        assert parts == expected

    @pytest.mark.parametrize("text", ["", "/", "3/", "/4", "1/2/3", "1//2"])
    def test_malformed_shapes(self, text):
        with pytest.raises(FractionParseError) as exc_info:
            split_fraction(text)

        assert exc_info.value.code == CODE_MALFORMED_FRACTION
        assert exc_info.value.message == f"Could not parse fraction '{text}'"

    def test_newline_is_part_of_a_side(self):
        assert split_fraction("3\n/4") == ("3\n", "4")


class TestParseScaledInteger:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12", ScaledInteger(12, 0)),
            ("0", ScaledInteger(0, 0)),
            ("007", ScaledInteger(7, 0)),
            ("35,6", ScaledInteger(356, 1)),
            ("35.6", ScaledInteger(356, 1)),
            ("0,125", ScaledInteger(125, 3)),
            ("1,50", ScaledInteger(150, 2)),
            ("0,0", ScaledInteger(0, 1)),
        ],
    )
    def test_numbers(self, text, expected):
        print_section("Decimal to rational")
        print_concept("Mantissa = digits without separator; scale = digits after it")

        result = parse_scaled_integer(text, "numerator")
        print_code_example(f"{text!r} -> {result} (value {result.value})")
        assert result == expected

    @pytest.mark.parametrize(
        "text",
        [
            "not-a-number",
            "",
            "1,",
            ",5",
            ".5",
            "1,2,3",
            "1.2.3",
            "-3",
            "+3",
            " 3",
            "3 ",
            "1e5",
            "١٢",
            "1_000",
        ],
    )
    def test_unparsable(self, text):
        with pytest.raises(FractionParseError) as exc_info:
            parse_scaled_integer(text, "denominator")

        assert exc_info.value.code == CODE_UNPARSABLE_NUMBER
        assert exc_info.value.message == f"Could not parse denominator = '{text}'"

    def test_role_only_changes_message(self):
        num = parse_scaled_integer("4,2", "numerator")
        den = parse_scaled_integer("4,2", "denominator")
        assert num == den

    def test_max_value_is_accepted(self):
        result = parse_scaled_integer(str(UINT64_MAX), "numerator")
        assert result == ScaledInteger(UINT64_MAX, 0)

    @pytest.mark.parametrize(
        "text",
        [
            str(UINT64_MAX + 1),
            "100000000000000000000",
            "1844674407370955161,6",
            "9" * 5000,
        ],
    )
    def test_too_large(self, text):
        with pytest.raises(IntegerOverflowError) as exc_info:
            parse_scaled_integer(text, "numerator")

        assert exc_info.value.code == CODE_INTEGER_TOO_LARGE
        assert "numerator" in exc_info.value.message

    def test_leading_zeros_do_not_count_towards_the_limit(self):
        text = "0" * 5000 + "42"
        assert parse_scaled_integer(text, "numerator") == ScaledInteger(42, 0)

    def test_scale_limit(self):
        ok = parse_scaled_integer("0," + "0" * 254 + "1", "numerator")
        assert ok == ScaledInteger(1, 255)

        with pytest.raises(IntegerOverflowError) as exc_info:
            parse_scaled_integer("0," + "0" * 255 + "1", "numerator")
        assert exc_info.value.code == CODE_INTEGER_TOO_LARGE
        assert "decimal places" in exc_info.value.message

    def test_custom_separators(self):
        assert parse_scaled_integer("1'5", "numerator", separators=("'",)) == (
            ScaledInteger(15, 1)
        )
        with pytest.raises(FractionParseError):
            parse_scaled_integer("1,5", "numerator", separators=(".",))

    def test_number_pattern_is_reused(self):
        assert number_pattern((",", ".")) is number_pattern((",", "."))
        assert number_pattern.cache_info().maxsize is not None

    @pytest.mark.parametrize("separators", [(), ("",), (",.",), ("7",), ("/",)])
    def test_invalid_separators(self, separators):
        with pytest.raises(ConfigurationError):
            parse_scaled_integer("1,5", "numerator", separators=separators)

    def test_errors_share_base_class(self):
        with pytest.raises(FracNormError):
            parse_scaled_integer("x", "numerator")


class TestScaledIntegerValue:
    def test_value_is_exact(self):
        from fractions import Fraction

        assert ScaledInteger(356, 1).value == Fraction(178, 5)
        assert ScaledInteger(12).value == Fraction(12)
