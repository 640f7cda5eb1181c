from pytest import mark

from iriref.chars import (
    is_dec_octet_text,
    is_gen_delims,
    is_hex_digit,
    is_iprivate,
    is_iunreserved,
    is_sub_delims,
    is_ucschar,
    is_unreserved,
)


@mark.parametrize("c", ("a", "Z", "0", "9", "-", ".", "_", "~"))
def test_unreserved(c):
    assert is_unreserved(c)


@mark.parametrize("c", ("", " ", "%", "/", "!", chr(0xE9), "ab"))
def test_not_unreserved(c):
    assert not is_unreserved(c)


def test_delims():
    assert all(is_sub_delims(c) for c in "!$&'()*+,;=")
    assert all(is_gen_delims(c) for c in ":/?#[]@")
    assert not any(is_sub_delims(c) for c in ":/?#[]@")
    assert not any(is_gen_delims(c) for c in "!$&'()*+,;=")


@mark.parametrize(
    "cp",
    (
        0xA0,
        0xE9,
        0x1FEC,
        0x70B9,
        0xD7FF,
        0xF900,
        0xFDCF,
        0xFDF0,
        0xFFEF,
        0x10000,
        0x1FFFD,
        0x20000,
        0xE1000,
        0xEFFFD,
    ),
)
def test_ucschar(cp):
    assert is_ucschar(chr(cp))
    assert is_iunreserved(chr(cp))


@mark.parametrize(
    "cp",
    (
        0x61,
        0x9F,
        0xD800,  # surrogates
        0xE000,  # iprivate
        0xFDD0,  # noncharacter
        0xFFFE,
        0x1FFFE,
        0xE0FFF,
        0xF0000,
    ),
)
def test_not_ucschar(cp):
    assert not is_ucschar(chr(cp))


@mark.parametrize("cp", (0xE000, 0xF8FF, 0xF0000, 0xFFFFD, 0x100000, 0x10FFFD))
def test_iprivate(cp):
    assert is_iprivate(chr(cp))
    assert not is_iunreserved(chr(cp))


@mark.parametrize("cp", (0xDFFF, 0xF900, 0xEFFFD, 0xFFFFE, 0x10FFFF, 0x61))
def test_not_iprivate(cp):
    assert not is_iprivate(chr(cp))


def test_predicates_reject_empty_and_long_strings():
    assert not is_ucschar("")
    assert not is_iprivate("")
    assert not is_ucschar(chr(0xA0) * 2)


def test_hex_digit():
    assert all(is_hex_digit(c) for c in "0123456789abcdefABCDEF")
    assert not any(is_hex_digit(c) for c in "gG:%")
    assert not is_hex_digit("")


@mark.parametrize("s", ("0", "9", "10", "99", "100", "199", "200", "249", "250", "255", "007"))
def test_dec_octet(s):
    assert is_dec_octet_text(s)


@mark.parametrize("s", ("", "256", "260", "300", "999", "1000", "0255", "1a", "-1", chr(0x661)))
def test_not_dec_octet(s):
    assert not is_dec_octet_text(s)
