"""iriref.errors
Everything raised by iriref derives from ValueError.
"""

import enum

from typing import Self


class IRIError(ValueError):
    pass


class ParseErrorKind(enum.Enum):
    NON_ALPHA_LEADING = "scheme must start with an alphabetic character"
    INVALID_SCHEME_CHARS = "invalid character in scheme"
    MISSING_COLON = "missing colon after scheme"
    INVALID_HOST = "invalid IP literal"
    INVALID_PORT = "invalid port"
    INVALID_PERCENT_ENCODING = "percent sign not followed by two hex digits"
    UNEXPECTED_CHARACTERS = "unexpected characters"


class ParseError(IRIError):
    """The text does not match the grammar being parsed.
    kind says what went wrong and position is the index in text where it did.
    """

    def __init__(self: Self, kind: ParseErrorKind, text: str, position: int) -> None:
        super().__init__(f"{kind.value} at position {position} in {text!r}")
        self.kind: ParseErrorKind = kind
        self.text: str = text
        self.position: int = position


InvalidIRI = ParseError


class ResolutionError(IRIError):
    def __init__(self: Self, message: str, parse_error: ParseError) -> None:
        super().__init__(f"{message}: {parse_error}")
        self.parse_error: ParseError = parse_error


class InvalidBase(ResolutionError):
    pass


class InvalidReference(ResolutionError):
    pass
