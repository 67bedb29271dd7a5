import string

import pytest

from wirefdf.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c) is True
    assert is_alnum(c) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alnum(c) is True
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", ["-", " ", "\n", "é", "٣"])
def test_non_alnum(c):
    assert is_alnum(c) is False
    assert is_digit(c) is False


def test_integer_codes_accepted():
    assert is_digit(ord("7")) is True
    assert is_alpha(ord("Q")) is True
    assert is_digit(ord("a")) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_case_round_trip(c):
    upper = to_upper(c)
    assert upper == c.upper()
    assert to_lower(upper) == c


@pytest.mark.parametrize("c", ["1", "@", "é", "["])
def test_case_leaves_others(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_case_with_integer_keeps_type():
    assert to_upper(ord("b")) == ord("B")
    assert to_lower(ord("B")) == ord("b")


def test_multi_char_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_bad_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)


def test_atoi_plain_values():
    assert atoi("42") == 42
    assert atoi("  \t\n-17xyz") == -17
    assert atoi("+8") == 8


def test_atoi_double_sign_is_zero():
    assert atoi("+-5") == atoi("--5") == atoi("") == atoi("abc")
    assert atoi("--5") == 0


def test_atoi_stops_at_non_digit():
    assert atoi("10,0xFF") == 10


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 123456, -98765, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(1 << 31)