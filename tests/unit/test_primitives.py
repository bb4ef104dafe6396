"""Tests for the primitive converters."""

import math

import pytest
from csvconv import (
    ParseFailure,
    UnsupportedConversion,
    check_bounds,
    format_float,
    to_bool,
    to_float,
    to_int,
    to_string,
    to_uint,
)


class TestToString:
    """Test to_string()."""

    def test_text_passes_through(self):
        """Text is returned unchanged, delimiters and all."""
        assert to_string("a,b \"c\"") == "a,b \"c\""
        assert to_string("") == ""

    def test_bool_literals(self):
        """Booleans render as lowercase literals."""
        assert to_string(True) == "true"
        assert to_string(False) == "false"

    def test_integer_renders_decimal_digits(self):
        """Integers render as digit strings, never as a single character."""
        assert to_string(1234567890123) == "1234567890123"
        assert to_string(65) == "65"
        assert to_string(-42) == "-42"
        assert to_string(0) == "0"

    def test_float_is_fixed_point(self):
        """Floats never use exponent notation."""
        assert to_string(1.5) == "1.5"
        assert to_string(2.0) == "2.0"
        assert to_string(1e21) == "1000000000000000000000.0"
        assert to_string(1e-7) == "0.0000001"
        assert to_string(-0.25) == "-0.25"

    def test_non_finite_floats(self):
        """NaN and infinities have fixed spellings."""
        assert format_float(math.nan) == "NaN"
        assert format_float(math.inf) == "+Inf"
        assert format_float(-math.inf) == "-Inf"

    def test_unsupported_type(self):
        """Non-primitive input is rejected."""
        with pytest.raises(UnsupportedConversion, match="list to string"):
            to_string([1])


class TestToBool:
    """Test to_bool()."""

    @pytest.mark.parametrize("token", ["true", "yes", "1"])
    def test_true_literals(self, token):
        assert to_bool(token) is True

    @pytest.mark.parametrize("token", ["false", "no", "0"])
    def test_false_literals(self, token):
        assert to_bool(token) is False

    @pytest.mark.parametrize("token", ["maybe", "True", "YES", "", " true"])
    def test_other_text_fails(self, token):
        """Literals are exact and case-sensitive."""
        with pytest.raises(ParseFailure):
            to_bool(token)

    def test_bool_identity(self):
        assert to_bool(True) is True
        assert to_bool(False) is False

    def test_numbers_nonzero_is_true(self):
        """Any nonzero number is true."""
        assert to_bool(0) is False
        assert to_bool(-3) is True
        assert to_bool(0.0) is False
        assert to_bool(0.5) is True

    def test_unsupported_type(self):
        with pytest.raises(UnsupportedConversion):
            to_bool(None)


class TestToInt:
    """Test to_int()."""

    @pytest.mark.parametrize("token,expected", [
        ("42", 42),
        ("-42", -42),
        ("+7", 7),
        ("0", 0),
        ("0x1F", 31),
        ("0X1f", 31),
        ("017", 15),
        ("0o17", 15),
        ("0b101", 5),
        ("-0x10", -16),
    ])
    def test_parses_with_radix_prefix(self, token, expected):
        """The radix is detected from the prefix."""
        assert to_int(token) == expected

    @pytest.mark.parametrize("token", ["", "abc", "1.5", " 1", "1 ", "1_000", "09", "0x", "--1"])
    def test_malformed_text_fails(self, token):
        with pytest.raises(ParseFailure):
            to_int(token)

    def test_signed_64_bit_range(self):
        """Text outside the signed 64-bit range fails."""
        assert to_int("9223372036854775807") == 2 ** 63 - 1
        assert to_int("-9223372036854775808") == -2 ** 63
        with pytest.raises(ParseFailure, match="out of range"):
            to_int("9223372036854775808")

    def test_bool_maps_to_one_and_zero(self):
        assert to_int(True) == 1
        assert to_int(False) == 0

    def test_float_truncates_toward_zero(self):
        assert to_int(3.9) == 3
        assert to_int(-3.9) == -3

    def test_large_integers_are_narrowed(self):
        """Integers wider than 64 bits wrap around like a two's complement cast."""
        assert to_int(2 ** 63) == -2 ** 63
        assert to_int(2 ** 64 - 1) == -1

    def test_non_finite_float_is_unsupported(self):
        with pytest.raises(UnsupportedConversion, match="not finite"):
            to_int(math.nan)


class TestToUint:
    """Test to_uint()."""

    def test_parses_text(self):
        assert to_uint("42") == 42
        assert to_uint("0xff") == 255
        assert to_uint("18446744073709551615") == 2 ** 64 - 1

    @pytest.mark.parametrize("token", ["-1", "+1", "18446744073709551616", "x"])
    def test_negative_or_out_of_range_text_fails(self, token):
        with pytest.raises(ParseFailure):
            to_uint(token)

    def test_negative_integer_wraps(self):
        assert to_uint(-1) == 2 ** 64 - 1

    def test_bool_and_float(self):
        assert to_uint(True) == 1
        assert to_uint(2.7) == 2


class TestToFloat:
    """Test to_float()."""

    def test_parses_text(self):
        assert to_float("1.5") == 1.5
        assert to_float("-0.25") == -0.25
        assert to_float("1e3") == 1000.0

    def test_special_values(self):
        assert to_float("inf") == math.inf
        assert to_float("-Infinity") == -math.inf
        assert math.isnan(to_float("NaN"))

    @pytest.mark.parametrize("token", ["", "abc", " 1.0", "1.0 ", "1_0", "1,5"])
    def test_malformed_text_fails(self, token):
        with pytest.raises(ParseFailure):
            to_float(token)

    def test_overflow_fails(self):
        """A finite literal too large for a float is out of range."""
        with pytest.raises(ParseFailure, match="out of range"):
            to_float("1e400")

    def test_widens_numbers(self):
        assert to_float(3) == 3.0
        assert to_float(True) == 1.0
        assert to_float(False) == 0.0

    def test_integer_wider_than_double_fails(self):
        """An int past the float range is a conversion error, not OverflowError."""
        with pytest.raises(UnsupportedConversion, match="out of range"):
            to_float(10 ** 400)

    @pytest.mark.parametrize("token", ["\u0661\u0662\u0663", "\uff11.5"])
    def test_non_ascii_digits_fail(self, token):
        with pytest.raises(ParseFailure):
            to_float(token)


class TestCheckBounds:
    """Test check_bounds()."""

    @pytest.mark.parametrize("value,target", [
        (2 ** 63 - 1, "int"), (-2 ** 63, "int"), (0, "uint"), (2 ** 64 - 1, "uint"), (1.5, "uint"),
    ])
    def test_in_range_values_pass(self, value, target):
        assert check_bounds(value, target) == value

    @pytest.mark.parametrize("value,target", [
        (2 ** 63, "int"), (-2 ** 63 - 1, "int"), (-1, "uint"), (2 ** 64, "uint"),
        (1e30, "int"), (math.nan, "int"), (math.inf, "uint"),
    ])
    def test_out_of_range_values_fail(self, value, target):
        with pytest.raises(UnsupportedConversion, match="out of range"):
            check_bounds(value, target)


class TestRoundTrip:
    """Rendering then parsing gives the same value back."""

    @pytest.mark.parametrize("value", [0.1, -2.5, 1e-7, 1e21, 123456.789, 5e-324, 1.7976931348623157e308])
    def test_float(self, value):
        assert to_float(to_string(value)) == value

    @pytest.mark.parametrize("value", [0, -1, 2 ** 63 - 1, -2 ** 63])
    def test_int(self, value):
        assert to_int(to_string(value)) == value

    def test_uint_and_bool(self):
        assert to_uint(to_string(2 ** 64 - 1)) == 2 ** 64 - 1
        assert to_bool(to_string(True)) is True
        assert to_bool(to_string(False)) is False
