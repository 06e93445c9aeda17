import string

import pytest

from solong.chars import (
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_isalpha_accepts_letters(ch):
    assert isalpha(ch) is True
    assert isalpha(ord(ch)) is True


@pytest.mark.parametrize("ch", list(string.digits + " !@[`{~"))
def test_isalpha_rejects_non_letters(ch):
    assert isalpha(ch) is False


def test_isdigit_matches_ascii_digits():
    for code in range(256):
        assert isdigit(code) == (chr(code) in string.digits)


def test_isalnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_single_character_required():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        isdigit("")


def test_toupper_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert toupper(lower) == upper
        assert toupper(ord(lower)) == ord(upper)


def test_tolower_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert tolower(upper) == lower
        assert tolower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " "))
def test_case_conversion_leaves_others(ch):
    assert toupper(ch) == ch
    assert tolower(ch) == ch


def test_case_round_trip():
    for ch in string.ascii_letters:
        assert tolower(toupper(ch)) == ch.lower()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("\t\n+17xyz", 17),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("n", [0, 7, -7, 1442, -21442, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_pinned_values():
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(ord("a")) == str(ord("a"))