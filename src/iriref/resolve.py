"""iriref.resolve
Reference resolution from RFC 3986 section 5.2, applied to IRIs.
"""

import dataclasses
import logging

from .errors import InvalidBase, InvalidReference, ParseError
from .model import IRIRef, serialize
from .parse import parse_absolute, parse_relative

logger = logging.getLogger(__name__)


def remove_dot_segments(path: str) -> str:
    """Implementation of the "remove_dot_segments" routine from RFC 3986 section 5.2.4

    Instead of shuffling text between an input and an output buffer, this splits the path into
    units and folds them into a new list. The first unit of a rootless path is its first
    non-dot segment; every other unit is "/" followed by a segment. The result is the same as
    the RFC's, down to its handling of rootless paths, e.g. "a/../g" becomes "/g".
    """
    segments: list[str] = path.split("/")
    units: list[str]
    if path.startswith("/"):
        units = [f"/{segment}" for segment in segments[1:]]
    else:
        # Leading "./" and "../" are dropped outright (rule A), as is a lone "." or ".." (rule D).
        i: int = 0
        while i < len(segments) and segments[i] in (".", ".."):
            i += 1
        if i == len(segments):
            return ""
        units = [segments[i]] + [f"/{segment}" for segment in segments[i + 1 :]]

    output: list[str] = []
    for i, unit in enumerate(units):
        is_last: bool = i == len(units) - 1
        if unit == "/.":
            if is_last:
                output.append("/")
        elif unit == "/..":
            if len(output) > 0:
                output.pop()
            if is_last:
                output.append("/")
        else:
            output.append(unit)
    return "".join(output)


def merge_paths(base: IRIRef, r_path: str) -> str:
    """Implementation of the "merge" routine defined in RFC 3986 section 5.2.3"""
    if base.authority is not None and len(base.path) == 0:
        return f"/{r_path}"
    dirname, slash, _ = base.path.rpartition("/")
    return dirname + slash + r_path


def join(base: IRIRef, r: IRIRef, strict: bool = True) -> IRIRef:
    """Implementation of the "Transform References" algorithm from RFC 3986 section 5.2.2

    With strict=False, a reference whose scheme is the same as the base's is treated as if it
    had no scheme, so join(http://a/b/c/d;p?q, http:g) is http://a/b/c/g rather than http:g.
    """
    r_scheme: str | None = r.scheme
    if not strict and r.scheme == base.scheme:
        r_scheme = None

    if r_scheme is not None:
        logger.debug("reference %r has a scheme; base is ignored", r)
        return dataclasses.replace(r, path=remove_dot_segments(r.path))

    if r.authority is not None:
        logger.debug("reference %r has an authority", r)
        return IRIRef(
            scheme=base.scheme,
            authority=r.authority,
            path=remove_dot_segments(r.path),
            query=r.query,
            fragment=r.fragment,
        )

    path: str
    query: str | None
    if len(r.path) == 0:
        path = base.path
        query = r.query if r.query is not None else base.query
    elif r.path.startswith("/"):
        path = remove_dot_segments(r.path)
        query = r.query
    else:
        path = remove_dot_segments(merge_paths(base, r.path))
        query = r.query
    logger.debug("reference %r resolved against %r to path %r", r, base, path)
    return IRIRef(
        scheme=base.scheme,
        authority=base.authority,
        path=path,
        query=query,
        fragment=r.fragment,
    )


def resolve(base: str, reference: str, strict: bool = True) -> str:
    """Resolves reference against base, and returns the result as text.
    Raises InvalidBase if base is not an absolute IRI, and InvalidReference if reference is
    neither an IRI nor an irelative-ref.
    """
    try:
        b: IRIRef = parse_absolute(base)
    except ParseError as e:
        raise InvalidBase(f"invalid base IRI {base!r}", e) from e

    r: IRIRef
    try:
        r = parse_absolute(reference)
    except ParseError:
        logger.debug("%r is not an absolute IRI; parsing it as a relative reference", reference)
        try:
            r = parse_relative(reference)
        except ParseError as e:
            raise InvalidReference(f"invalid IRI reference {reference!r}", e) from e

    return serialize(join(b, r, strict=strict))
