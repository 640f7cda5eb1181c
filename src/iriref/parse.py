"""iriref.parse
A recursive-descent parser for the IRI and irelative-ref rules of RFC 3987.
Each method of _Parser implements the ABNF rule written above it. Alternatives are
tried in the order the RFC lists them, restoring the position after a failed one.
"""

from typing import Callable, NoReturn, Self

from .chars import (
    is_alpha,
    is_dec_octet_text,
    is_digit,
    is_gen_delims,
    is_hex_digit,
    is_iprivate,
    is_iunreserved,
    is_sub_delims,
    is_unreserved,
)
from .errors import ParseError, ParseErrorKind
from .model import Authority, HostKind, IRIRef, serialize


# ipchar = iunreserved / pct-encoded / sub-delims / ":" / "@"
def _is_ipchar(c: str) -> bool:
    return is_iunreserved(c) or is_sub_delims(c) or c in (":", "@")


# isegment-nz-nc = 1*( iunreserved / pct-encoded / sub-delims / "@" )
def _is_nc_char(c: str) -> bool:
    return is_iunreserved(c) or is_sub_delims(c) or c == "@"


# iuserinfo = *( iunreserved / pct-encoded / sub-delims / ":" )
def _is_userinfo_char(c: str) -> bool:
    return is_iunreserved(c) or is_sub_delims(c) or c == ":"


# ireg-name = *( iunreserved / pct-encoded / sub-delims )
def _is_reg_name_char(c: str) -> bool:
    return is_iunreserved(c) or is_sub_delims(c)


# iquery = *( ipchar / iprivate / "/" / "?" )
def _is_query_char(c: str) -> bool:
    return _is_ipchar(c) or is_iprivate(c) or c in ("/", "?")


# ifragment = *( ipchar / "/" / "?" )
def _is_fragment_char(c: str) -> bool:
    return _is_ipchar(c) or c in ("/", "?")


# IPvFuture tail: 1*( unreserved / sub-delims / ":" )
def _is_ipvfuture_char(c: str) -> bool:
    return is_unreserved(c) or is_sub_delims(c) or c == ":"


# Scheme tail. RFC 3986 doesn't allow "_" here, but it's common enough in the wild that we accept it.
def _is_scheme_char(c: str) -> bool:
    return is_alpha(c) or is_digit(c) or c in ("+", "-", ".", "_")


class _Parser:
    """Holds the text and the current position for a single parse. Not reusable."""

    def __init__(self: Self, text: str) -> None:
        self.text: str = text
        self.pos: int = 0

    def _peek(self: Self, offset: int = 0) -> str:
        i: int = self.pos + offset
        return self.text[i] if i < len(self.text) else ""

    def _literal(self: Self, s: str) -> bool:
        if self.text.startswith(s, self.pos):
            self.pos += len(s)
            return True
        return False

    def _fail(self: Self, kind: ParseErrorKind) -> NoReturn:
        raise ParseError(kind, self.text, self.pos)

    # pct-encoded = "%" HEXDIG HEXDIG
    def _pct_encoded(self: Self) -> str | None:
        if self._peek() == "%" and is_hex_digit(self._peek(1)) and is_hex_digit(self._peek(2)):
            result: str = self.text[self.pos : self.pos + 3].upper()
            self.pos += 3
            return result
        return None

    def _chars(self: Self, allowed: Callable[[str], bool], pct: bool = True) -> str:
        """Consumes the longest run of characters satisfying allowed.
        If pct is set, percent-encoded triplets are consumed too, with their hex digits capitalized.
        """
        result: str = ""
        while True:
            c: str = self._peek()
            if c != "" and allowed(c):
                result += c
                self.pos += 1
            elif pct and c == "%":
                encoded: str | None = self._pct_encoded()
                if encoded is None:
                    break
                result += encoded
            else:
                break
        return result

    def _end(self: Self) -> None:
        if self.pos < len(self.text):
            if self._peek() == "%":
                self._fail(ParseErrorKind.INVALID_PERCENT_ENCODING)
            self._fail(ParseErrorKind.UNEXPECTED_CHARACTERS)

    # IRI = scheme ":" ihier-part [ "?" iquery ] [ "#" ifragment ]
    def iri(self: Self) -> IRIRef:
        scheme: str = self.scheme()
        authority, path = self.hier_part(relative=False)
        query: str | None = self.query()
        fragment: str | None = self.fragment()
        self._end()
        return IRIRef(scheme=scheme, authority=authority, path=path, query=query, fragment=fragment)

    # irelative-ref = irelative-part [ "?" iquery ] [ "#" ifragment ]
    def irelative_ref(self: Self) -> IRIRef:
        authority, path = self.hier_part(relative=True)
        query: str | None = self.query()
        fragment: str | None = self.fragment()
        self._end()
        return IRIRef(scheme=None, authority=authority, path=path, query=query, fragment=fragment)

    # scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
    def scheme(self: Self) -> str:
        if not is_alpha(self._peek()):
            self._fail(ParseErrorKind.NON_ALPHA_LEADING)
        start: int = self.pos
        self.pos += 1
        self._chars(_is_scheme_char, pct=False)
        scheme: str = self.text[start : self.pos].lower()
        if not self._literal(":"):
            # A colon further on, not preceded by a delimiter, means the scheme has a bad character in it.
            c: str = self._peek()
            if c != "" and not is_gen_delims(c) and ":" in self.text[self.pos :]:
                self._fail(ParseErrorKind.INVALID_SCHEME_CHARS)
            self._fail(ParseErrorKind.MISSING_COLON)
        return scheme

    # ihier-part     = "//" iauthority ipath-abempty / ipath-absolute / ipath-rootless / ipath-empty
    # irelative-part = "//" iauthority ipath-abempty / ipath-absolute / ipath-noscheme / ipath-empty
    def hier_part(self: Self, relative: bool) -> tuple[Authority | None, str]:
        if self._literal("//"):
            authority: Authority = self.authority()
            return authority, self.path_abempty()
        path: str | None = self.path_absolute()
        if path is not None:
            return None, path
        path = self.path_noscheme() if relative else self.path_rootless()
        if path is not None:
            return None, path
        # ipath-empty = 0<ipchar>
        return None, ""

    # iauthority = [ iuserinfo "@" ] ihost [ ":" port ]
    def authority(self: Self) -> Authority:
        start: int = self.pos
        userinfo: str | None = self._chars(_is_userinfo_char)
        if not self._literal("@"):
            self.pos = start
            userinfo = None
        host, host_kind = self.host()
        port: int | None = None
        if self._literal(":"):
            port = self.port()
        return Authority(userinfo=userinfo, host=host, port=port, host_kind=host_kind)

    # ihost = IP-literal / IPv4address / ireg-name
    def host(self: Self) -> tuple[str, HostKind]:
        if self._peek() == "[":
            literal: str | None = self.ip_literal()
            if literal is None:
                self._fail(ParseErrorKind.INVALID_HOST)
            return literal, HostKind.IP_LITERAL
        start: int = self.pos
        # "1.2.3.4.example" starts with an IPv4address, but only ireg-name matches all of it.
        if self.ipv4address() is not None:
            c: str = self._peek()
            if not (_is_reg_name_char(c) or c == "%"):
                return self.text[start : self.pos], HostKind.IPV4
            self.pos = start
        return self._chars(_is_reg_name_char), HostKind.REG_NAME

    # port = *DIGIT
    # (An empty port after a ":" is rejected.)
    def port(self: Self) -> int:
        digits: str = self._chars(is_digit, pct=False)
        if len(digits) == 0:
            self._fail(ParseErrorKind.INVALID_PORT)
        try:
            return int(digits, base=10)
        except ValueError as e:
            # Too many digits for int().
            raise ParseError(ParseErrorKind.INVALID_PORT, self.text, self.pos - len(digits)) from e

    # IP-literal = "[" ( IPv6address / IPvFuture ) "]"
    # (IRIs don't support zone IDs, so there's no IPv6addrz here.)
    def ip_literal(self: Self) -> str | None:
        start: int = self.pos
        if not self._literal("["):
            return None
        inner: int = self.pos
        if self.ipv6address() is not None and self._literal("]"):
            return self.text[start : self.pos]
        self.pos = inner
        if self.ipvfuture() is not None and self._literal("]"):
            return self.text[start : self.pos]
        self.pos = start
        return None

    # IPv6address =                            6( h16 ":" ) ls32
    #             /                       "::" 5( h16 ":" ) ls32
    #             / [               h16 ] "::" 4( h16 ":" ) ls32
    #             / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
    #             / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
    #             / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
    #             / [ *4( h16 ":" ) h16 ] "::"              ls32
    #             / [ *5( h16 ":" ) h16 ] "::"              h16
    #             / [ *6( h16 ":" ) h16 ] "::"
    # ls32        = ( h16 ":" h16 ) / IPv4address
    # Rather than trying all nine alternatives, this counts the groups on each side of the "::".
    # An IPv4 tail starts with something that looks like an h16 and is worth two groups.
    def ipv6address(self: Self) -> str | None:
        start: int = self.pos
        leading: list[str] = self.h16_groups()
        if self._literal("::"):
            trailing: list[str] = self.h16_groups()
            count: int = len(leading) + len(trailing)
            if len(trailing) > 0 and count <= 6 and is_dec_octet_text(trailing[-1]) and self.ipv4_tail():
                count += 1
            if count > 7:
                self.pos = start
                return None
        elif len(leading) == 7 and is_dec_octet_text(leading[-1]) and self.ipv4_tail():
            pass
        elif len(leading) != 8:
            self.pos = start
            return None
        return self.text[start : self.pos]

    # h16 *( ":" h16 )
    # Stops in front of a "::", so the caller can look for the elision.
    def h16_groups(self: Self) -> list[str]:
        groups: list[str] = []
        group: str | None = self.h16()
        if group is None:
            return groups
        groups.append(group)
        while True:
            before_colon: int = self.pos
            if not self._literal(":"):
                break
            group = self.h16()
            if group is None:
                self.pos = before_colon
                break
            groups.append(group)
        return groups

    # h16 = 1*4HEXDIG
    def h16(self: Self) -> str | None:
        start: int = self.pos
        digits: str = self._chars(is_hex_digit, pct=False)
        if not 1 <= len(digits) <= 4:
            self.pos = start
            return None
        return digits

    # IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
    def ipvfuture(self: Self) -> str | None:
        start: int = self.pos
        if self._peek() in ("v", "V"):
            self.pos += 1
            if len(self._chars(is_hex_digit, pct=False)) > 0 and self._literal("."):
                if len(self._chars(_is_ipvfuture_char, pct=False)) > 0:
                    return self.text[start : self.pos]
        self.pos = start
        return None

    # IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
    def ipv4address(self: Self) -> str | None:
        start: int = self.pos
        if self.dec_octet() is None or not self.ipv4_tail():
            self.pos = start
            return None
        return self.text[start : self.pos]

    # The last three octets of an IPv4address: 3( "." dec-octet )
    def ipv4_tail(self: Self) -> bool:
        start: int = self.pos
        for _ in range(3):
            if not self._literal(".") or self.dec_octet() is None:
                self.pos = start
                return False
        return True

    # dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
    def dec_octet(self: Self) -> str | None:
        start: int = self.pos
        digits: str = self._chars(is_digit, pct=False)
        if not is_dec_octet_text(digits):
            self.pos = start
            return None
        return digits

    # ipath-abempty = *( "/" isegment )
    def path_abempty(self: Self) -> str:
        result: str = ""
        while self._literal("/"):
            # isegment = *ipchar
            result += "/" + self._chars(_is_ipchar)
        return result

    # ipath-absolute = "/" [ isegment-nz *( "/" isegment ) ]
    def path_absolute(self: Self) -> str | None:
        if not self._literal("/"):
            return None
        result: str = "/"
        # isegment-nz = 1*ipchar
        segment: str = self._chars(_is_ipchar)
        if len(segment) > 0:
            result += segment + self.path_abempty()
        return result

    # ipath-rootless = isegment-nz *( "/" isegment )
    def path_rootless(self: Self) -> str | None:
        segment: str = self._chars(_is_ipchar)
        if len(segment) == 0:
            return None
        return segment + self.path_abempty()

    # ipath-noscheme = isegment-nz-nc *( "/" isegment )
    def path_noscheme(self: Self) -> str | None:
        segment: str = self._chars(_is_nc_char)
        if len(segment) == 0:
            return None
        return segment + self.path_abempty()

    # "?" iquery
    def query(self: Self) -> str | None:
        if not self._literal("?"):
            return None
        return self._chars(_is_query_char)

    # "#" ifragment
    def fragment(self: Self) -> str | None:
        if not self._literal("#"):
            return None
        return self._chars(_is_fragment_char)


def parse_absolute(data: str) -> IRIRef:
    """RFC 3987-compliant IRI parser.
    The whole of data must match; otherwise ParseError is raised. The scheme is lowercased,
    and percent-encodings are capitalized.
    """
    return _Parser(data).iri()


def parse_relative(data: str) -> IRIRef:
    """RFC 3987-compliant irelative-ref parser.
    If you want to parse a relative reference like "../path?query#fragment", this is the function to use.
    """
    return _Parser(data).irelative_ref()


def parse_reference(data: str) -> IRIRef:
    """RFC 3987-compliant IRI-Reference parser.
    Only use this when you don't know whether you want to parse an IRI or an irelative-ref.
    """
    try:
        return parse_absolute(data)
    except ParseError:
        pass
    return parse_relative(data)


def validate(data: str) -> str:
    """Returns data unchanged if it is a valid IRI. Raises ParseError otherwise."""
    parse_absolute(data)
    return data


def make_canonical(data: str) -> str:
    return serialize(parse_absolute(data))
