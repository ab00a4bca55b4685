import pytest

from miniprintf.numbers import (
    format_binary,
    format_hex,
    format_hex_upper,
    format_int,
    format_octal,
    format_pointer,
    format_unsigned,
)
from miniprintf.spec import Flag, Size, Spec

PLAIN = Spec()
UI = 2147483647 + 1024  # INT_MAX + 1024


def test_negative_int_from_example():
    assert format_int(-762534, PLAIN) == "-762534"


@pytest.mark.parametrize("value", [0, 1, -1, 39, 123456, -2147483648, 2147483647])
def test_int_round_trip(value):
    assert int(format_int(value, PLAIN), 10) == value


def test_int_wraps_to_32_bits():
    assert int(format_int(2**31, PLAIN)) == -(2**31)


def test_int_short_size_wraps():
    assert int(format_int(65536 + 5, Spec(size=Size.SHORT))) == 5


def test_int_long_size_keeps_value():
    assert int(format_int(2**40, Spec(size=Size.LONG))) == 2**40


def test_int_width_right_aligns():
    out = format_int(42, Spec(width=5))
    assert len(out) == 5
    assert out.lstrip(" ") == "42"


def test_int_minus_flag_left_aligns():
    out = format_int(42, Spec(flags=Flag.MINUS, width=5))
    assert len(out) == 5
    assert out.rstrip(" ") == "42"


def test_int_zero_pad_keeps_sign_first():
    out = format_int(-42, Spec(flags=Flag.ZERO, width=6))
    assert len(out) == 6
    assert out.startswith("-0")
    assert int(out) == -42


def test_int_plus_flag():
    out = format_int(7, Spec(flags=Flag.PLUS))
    assert out.startswith("+")
    assert int(out) == 7


def test_int_zero_precision_zero_prints_nothing():
    assert format_int(0, Spec(precision=0)) == ""


def test_int_precision_pads_digits():
    out = format_int(7, Spec(precision=4))
    assert len(out) == 4
    assert int(out) == 7


def test_int_rejects_non_integer():
    with pytest.raises(TypeError):
        format_int("12", PLAIN)


@pytest.mark.parametrize("value", [1, 5, 255, 1024, UI])
def test_binary_round_trip(value):
    out = format_binary(value, PLAIN)
    assert int(out, 2) == value
    assert out.startswith("1")


def test_binary_zero():
    assert format_binary(0, PLAIN) == "0"


def test_binary_negative_is_32_ones():
    assert format_binary(-1, PLAIN) == "1" * 32


def test_binary_ignores_width():
    assert format_binary(5, Spec(width=10)) == format_binary(5, PLAIN)


def test_unsigned_round_trip():
    assert int(format_unsigned(UI, PLAIN)) == UI


def test_unsigned_wraps_negative():
    assert int(format_unsigned(-1, PLAIN)) == 2**32 - 1


def test_unsigned_short():
    assert int(format_unsigned(-1, Spec(size=Size.SHORT))) == 2**16 - 1


def test_unsigned_zero_pad_width():
    out = format_unsigned(12, Spec(flags=Flag.ZERO, width=6))
    assert len(out) == 6
    assert out.startswith("0")
    assert int(out) == 12


def test_octal_round_trip():
    assert int(format_octal(UI, PLAIN), 8) == UI


def test_octal_hash_adds_leading_zero():
    plain = format_octal(UI, PLAIN)
    assert format_octal(UI, Spec(flags=Flag.HASH)) == "0" + plain


def test_octal_hash_on_zero_has_no_prefix():
    assert format_octal(0, Spec(flags=Flag.HASH)) == format_octal(0, PLAIN)


def test_hex_round_trip_and_case():
    lower = format_hex(UI, PLAIN)
    upper = format_hex_upper(UI, PLAIN)
    assert int(lower, 16) == UI
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_hex_hash_prefixes():
    assert format_hex(UI, Spec(flags=Flag.HASH)) == "0x" + format_hex(UI, PLAIN)
    assert format_hex_upper(UI, Spec(flags=Flag.HASH)) == "0X" + format_hex_upper(UI, PLAIN)


def test_hex_precision_zero_on_zero():
    assert format_hex(0, Spec(precision=0)) == ""


def test_hex_upper_flag_matches_helper():
    assert format_hex(48879, PLAIN, upper=True) == format_hex_upper(48879, PLAIN)


def test_pointer_from_example():
    assert format_pointer(0x7FFE637541F0, PLAIN) == "0x7ffe637541f0"


@pytest.mark.parametrize("address", [None, 0])
def test_pointer_null(address):
    assert format_pointer(address, PLAIN) == "(nil)"


def test_pointer_plus_flag():
    out = format_pointer(0x7FFE637541F0, Spec(flags=Flag.PLUS))
    assert out == "+" + format_pointer(0x7FFE637541F0, PLAIN)


def test_pointer_width_right_aligns():
    out = format_pointer(0x7FFE637541F0, Spec(width=20))
    assert len(out) == 20
    assert out.lstrip(" ") == "0x7ffe637541f0"


def test_pointer_zero_pad_after_prefix():
    out = format_pointer(0x7FFE637541F0, Spec(flags=Flag.ZERO, width=20))
    assert len(out) == 20
    assert out.startswith("0x0")
    assert int(out, 16) == 0x7FFE637541F0