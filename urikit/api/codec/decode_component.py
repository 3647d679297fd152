"""Tolerant percent-decoding of URI components."""

from urllib.parse import unquote

from ...utils.get_logger import get_logger

logger = get_logger("codec")


def decode_component(value: str) -> str:
    """Decode `%XX` escapes in a component.

    Escapes that are not followed by two hex digits are kept literally. When
    the escapes do not form valid UTF-8 the component is returned undecoded,
    so already human-readable strings survive a parse.

    Args:
        value: Raw component text as found in a URI string

    Returns:
        Decoded component text
    """
    if "%" not in value:
        return value
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        logger.debug("Leaving component undecoded (invalid UTF-8 escape): %r", value)
        return value
