import pytest

from sigtalk.chartype import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ASCII_CODES = range(0, 128)
WIDE_CODES = range(-10, 400)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_isalpha_matches_str_for_ascii(code):
    assert isalpha(code) == chr(code).isalpha()


@pytest.mark.parametrize("code", ASCII_CODES)
def test_isdigit_matches_str_for_ascii(code):
    assert isdigit(code) == chr(code).isdigit()


@pytest.mark.parametrize("code", ASCII_CODES)
def test_isprint_matches_str_for_ascii(code):
    assert isprint(code) == chr(code).isprintable()


def test_isalnum_is_union_of_alpha_and_digit():
    for code in WIDE_CODES:
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_nothing_outside_ascii_is_classified():
    for code in list(range(-10, 0)) + list(range(128, 400)):
        assert not isalpha(code)
        assert not isdigit(code)
        assert not isalnum(code)
        assert not isprint(code)
        assert not isascii(code)


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_bounds():
    assert isprint(ord(" "))
    assert isprint(ord("~"))
    assert not isprint(ord("\n"))
    assert not isprint(127)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_case_conversion_matches_str(code):
    assert tolower(code) == ord(chr(code).lower())
    assert toupper(code) == ord(chr(code).upper())


def test_case_conversion_leaves_non_ascii_unchanged():
    for code in list(range(-10, 0)) + list(range(128, 400)):
        assert tolower(code) == code
        assert toupper(code) == code


def test_case_round_trip_on_letters():
    for letter in "abcdefghijklmnopqrstuvwxyz":
        code = ord(letter)
        assert tolower(toupper(code)) == code
        assert toupper(tolower(toupper(code))) == toupper(code)


def test_tolower_of_upper_c():
    assert tolower(ord("C")) == ord("c")
    assert toupper(ord("F")) == ord("F")