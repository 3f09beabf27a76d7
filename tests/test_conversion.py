import pytest

from libft.conversion import atoi, atol, itoa, strtoul

ULONG_MAX = 2**64 - 1


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+17", 17),
        (" \t\n\v\f\r-99", -99),
        ("123abc", 123),
        ("0", 0),
        ("-2147483648", -2147483648),
        ("2147483647", 2147483647),
    ],
)
def test_atoi_parses_leading_integer(text, expected):
    assert atoi(text) == expected


def test_atoi_stops_on_non_digit_input():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0
    assert atoi("+-5") == 0
    assert atoi("- 5") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -(2**31)


def test_atol_handles_64_bit_range():
    assert atol("9223372036854775807") == 9223372036854775807
    assert atol("-9223372036854775808") == -9223372036854775808
    assert atol("  -1234567890123xyz") == -1234567890123


def test_atol_wraps_to_64_bits():
    assert atol("9223372036854775808") == -(2**63)


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_zero_and_negative_sign():
    assert itoa(0) == "0"
    assert itoa(-5).startswith("-")


def test_strtoul_decimal_with_end():
    assert strtoul("  42rest", 10) == (42, 4)


@pytest.mark.parametrize("n", [0, 1, 7, 255, 4096, 123456789, ULONG_MAX])
@pytest.mark.parametrize("base, spec", [(2, "b"), (8, "o"), (10, "d"), (16, "x")])
def test_strtoul_round_trips_formatted_values(n, base, spec):
    text = format(n, spec)
    assert strtoul(text, base) == (n, len(text))


def test_strtoul_base_zero_detection():
    assert strtoul("0x1f", 0)[0] == int("1f", 16)
    assert strtoul("0X1F", 0)[0] == int("1F", 16)
    assert strtoul("017", 0)[0] == int("17", 8)
    assert strtoul("17", 0)[0] == int("17", 10)


def test_strtoul_skips_hex_prefix_in_base_16():
    text = "0xdeadBEEF"
    assert strtoul(text, 16) == (int("deadBEEF", 16), len(text))


def test_strtoul_base_36_letters():
    assert strtoul("zZ", 36) == (int("zz", 36), 2)


def test_strtoul_stops_at_invalid_digit():
    value, end = strtoul("129", 2)
    assert value == 1
    assert end == 1


def test_strtoul_octal_rejects_eight():
    value, end = strtoul("0789", 0)
    assert value == int("07", 8)
    assert end == 2


def test_strtoul_no_digits():
    assert strtoul("xyz", 10) == (0, 0)
    assert strtoul("", 10) == (0, 0)


def test_strtoul_end_after_sign_and_space_without_digits():
    value, end = strtoul("  -", 10)
    assert value == 0
    assert end == len("  -")


def test_strtoul_overflow_saturates_and_consumes_digits():
    text = "99999999999999999999999"
    assert strtoul(text, 10) == (ULONG_MAX, len(text))


def test_strtoul_negative_wraps():
    assert strtoul("-1", 10)[0] == ULONG_MAX
    assert strtoul("-5", 10)[0] == (ULONG_MAX + 1) - 5


def test_strtoul_default_base_detects_prefix():
    assert strtoul("0x10") == strtoul("0x10", 0)
    assert strtoul("0x10")[0] == int("10", 16)