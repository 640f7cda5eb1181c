"""iriref.model
The structured form of an IRI-Reference, and its serialization.
"""

import dataclasses
import enum
import functools

from typing import Any, Self


class HostKind(enum.Enum):
    """Which alternative of the ihost rule matched."""

    IP_LITERAL = "IP-literal"
    IPV4 = "IPv4address"
    REG_NAME = "ireg-name"


def _optional_key(value: Any) -> tuple:
    # Absent components sort before present ones, even empty ones.
    if value is None:
        return (0,)
    return (1, value)


@functools.total_ordering
@dataclasses.dataclass(frozen=True)
class Authority:
    """userinfo@host:port"""

    userinfo: str | None
    host: str
    port: int | None
    host_kind: HostKind = dataclasses.field(default=HostKind.REG_NAME, compare=False)

    def _sort_key(self: Self) -> tuple:
        return (_optional_key(self.userinfo), self.host, _optional_key(self.port))

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, Authority):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def serialize(self: Self) -> str:
        result: str = ""
        if self.userinfo is not None:
            result += f"{self.userinfo}@"
        result += self.host
        if self.port is not None:
            result += f":{self.port}"
        return result


@functools.total_ordering
@dataclasses.dataclass(frozen=True)
class IRIRef:
    """An IRI-Reference: an absolute IRI when scheme is set, otherwise a relative reference.
    You should not instantiate this directly. Instead use one of the parse_* functions.
    """

    scheme: str | None
    authority: Authority | None
    path: str
    query: str | None
    fragment: str | None

    @property
    def is_absolute(self: Self) -> bool:
        return self.scheme is not None

    def _sort_key(self: Self) -> tuple:
        return (
            _optional_key(self.scheme),
            _optional_key(None if self.authority is None else self.authority._sort_key()),
            self.path,
            _optional_key(self.query),
            _optional_key(self.fragment),
        )

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, IRIRef):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self: Self) -> str:
        return self.serialize()

    def serialize(self: Self) -> str:
        return serialize(self)


def serialize(ref: IRIRef) -> str:
    """Direct translation of RFC 3986 section 5.3"""
    result: str = ""
    if ref.scheme is not None:
        result += f"{ref.scheme}:"
    if ref.authority is not None:
        result += f"//{ref.authority.serialize()}"
    result += ref.path
    if ref.query is not None:
        result += f"?{ref.query}"
    if ref.fragment is not None:
        result += f"#{ref.fragment}"
    return result
