"""Strict component encoding used for canonical URI strings."""

from urllib.parse import quote


def encode_component(value: str) -> str:
    """Percent-encode everything except the RFC 3986 unreserved characters.

    Only `A-Z a-z 0-9 - . _ ~` survive. Unlike a browser's component encoder,
    `! ' ( ) *` are escaped too. Non-ASCII characters are encoded as their
    UTF-8 bytes, each as `%XX` with upper-case hex digits.

    Args:
        value: Decoded component text

    Returns:
        Encoded component text
    """
    return quote(value, safe="")
