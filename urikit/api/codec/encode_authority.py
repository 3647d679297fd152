"""Encoding of a URI authority."""

from collections.abc import Callable

from .percent_encode_char import percent_encode_char

_DELIMITERS = ("/", "?", "#")


def encode_authority(authority: str, encoder: Callable[[str], str]) -> str:
    """Encode an authority, leaving everything after the first `:` as written.

    The encoder only sees the part before the first `:`, so ports are never
    escaped. `/`, `?` and `#` are escaped on both sides of the colon, even
    with a no-op encoder, because any of them would end the authority when
    the string is parsed again.

    Args:
        authority: Decoded authority
        encoder: Component encoder applied to the part before the first `:`

    Returns:
        Encoded authority
    """
    host, colon, port = authority.partition(":")
    encoded = encoder(host) + colon + port
    for delimiter in _DELIMITERS:
        if delimiter in encoded:
            encoded = encoded.replace(delimiter, percent_encode_char(delimiter))
    return encoded
