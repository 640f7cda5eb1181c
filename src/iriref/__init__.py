__version__ = "0.1"

from .chars import is_dec_octet_text, is_gen_delims, is_hex_digit, is_iprivate, is_iunreserved, is_sub_delims, is_ucschar, is_unreserved
from .errors import IRIError, InvalidBase, InvalidIRI, InvalidReference, ParseError, ParseErrorKind, ResolutionError
from .model import Authority, HostKind, IRIRef, serialize
from .parse import make_canonical, parse_absolute, parse_reference, parse_relative, validate
from .resolve import join, merge_paths, remove_dot_segments, resolve
