"""iriref.chars
Character classes from RFCs 3986, 3987 and 5234, as predicates over single code points.
"""

import bisect
import string

# ALPHA = %x41-5A / %x61-7A
_ALPHA: frozenset[str] = frozenset(string.ascii_letters)

# DIGIT = %x30-39
_DIGIT: frozenset[str] = frozenset(string.digits)

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
# (ABNF strings are case-insensitive, so lowercase is fine too.)
_HEXDIG: frozenset[str] = frozenset(string.hexdigits)

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
_UNRESERVED: frozenset[str] = _ALPHA | _DIGIT | frozenset("-._~")

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
_SUB_DELIMS: frozenset[str] = frozenset("!$&'()*+,;=")

# gen-delims = ":" / "/" / "?" / "#" / "[" / "]" / "@"
_GEN_DELIMS: frozenset[str] = frozenset(":/?#[]@")

# ucschar = %xA0-D7FF / %xF900-FDCF / %xFDF0-FFEF
#         / %x10000-1FFFD / %x20000-2FFFD / %x30000-3FFFD
#         / %x40000-4FFFD / %x50000-5FFFD / %x60000-6FFFD
#         / %x70000-7FFFD / %x80000-8FFFD / %x90000-9FFFD
#         / %xA0000-AFFFD / %xB0000-BFFFD / %xC0000-CFFFD
#         / %xD0000-DFFFD / %xE1000-EFFFD
_UCSCHAR_RANGES: tuple[tuple[int, int], ...] = (
    (0xA0, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFEF),
    (0x10000, 0x1FFFD),
    (0x20000, 0x2FFFD),
    (0x30000, 0x3FFFD),
    (0x40000, 0x4FFFD),
    (0x50000, 0x5FFFD),
    (0x60000, 0x6FFFD),
    (0x70000, 0x7FFFD),
    (0x80000, 0x8FFFD),
    (0x90000, 0x9FFFD),
    (0xA0000, 0xAFFFD),
    (0xB0000, 0xBFFFD),
    (0xC0000, 0xCFFFD),
    (0xD0000, 0xDFFFD),
    (0xE1000, 0xEFFFD),
)
_UCSCHAR_STARTS: tuple[int, ...] = tuple(lo for lo, _ in _UCSCHAR_RANGES)

# iprivate = %xE000-F8FF / %xF0000-FFFFD / %x100000-10FFFD
_IPRIVATE_RANGES: tuple[tuple[int, int], ...] = (
    (0xE000, 0xF8FF),
    (0xF0000, 0xFFFFD),
    (0x100000, 0x10FFFD),
)
_IPRIVATE_STARTS: tuple[int, ...] = tuple(lo for lo, _ in _IPRIVATE_RANGES)


def _in_ranges(c: str, starts: tuple[int, ...], ranges: tuple[tuple[int, int], ...]) -> bool:
    if len(c) != 1:
        return False
    cp: int = ord(c)
    # Index of the last range that starts at or before cp.
    i: int = bisect.bisect_right(starts, cp) - 1
    return i >= 0 and cp <= ranges[i][1]


def is_alpha(c: str) -> bool:
    return c in _ALPHA


def is_digit(c: str) -> bool:
    return c in _DIGIT


def is_hex_digit(c: str) -> bool:
    return c in _HEXDIG


def is_unreserved(c: str) -> bool:
    return c in _UNRESERVED


def is_sub_delims(c: str) -> bool:
    return c in _SUB_DELIMS


def is_gen_delims(c: str) -> bool:
    return c in _GEN_DELIMS


def is_ucschar(c: str) -> bool:
    """True if c is one of the non-ASCII characters RFC 3987 allows unescaped."""
    return _in_ranges(c, _UCSCHAR_STARTS, _UCSCHAR_RANGES)


def is_iprivate(c: str) -> bool:
    """True if c is a private-use character. These are only allowed in the query."""
    return _in_ranges(c, _IPRIVATE_STARTS, _IPRIVATE_RANGES)


def is_iunreserved(c: str) -> bool:
    # iunreserved = ALPHA / DIGIT / "-" / "." / "_" / "~" / ucschar
    return is_unreserved(c) or is_ucschar(c)


def is_dec_octet_text(s: str) -> bool:
    """Returns whether s is 1 to 3 digits with a value of at most 255.
    Leading zeros are tolerated, so is_dec_octet_text("010") is True.
    """
    return 1 <= len(s) <= 3 and all(c in _DIGIT for c in s) and int(s) <= 255
