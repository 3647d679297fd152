"""Percent-encoding rules for URI components."""

from .decode_component import decode_component
from .encode_authority import encode_authority
from .encode_component import encode_component
from .encode_noop import encode_noop
from .encode_path import encode_path
from .percent_encode_char import percent_encode_char

__all__ = [
    "decode_component",
    "encode_authority",
    "encode_component",
    "encode_noop",
    "encode_path",
    "percent_encode_char",
]
