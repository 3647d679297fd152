"""Segment-wise encoding of a URI path."""

from collections.abc import Callable

from .percent_encode_char import percent_encode_char


def encode_path(path: str, encoder: Callable[[str], str]) -> str:
    """Encode each `/`-delimited segment of a path, keeping the slashes.

    `#` and `?` are always escaped inside segments, even with a no-op encoder,
    because a bare fragment or query marker in the path would not parse back.

    Args:
        path: Decoded path
        encoder: Component encoder applied to every segment

    Returns:
        Encoded path
    """
    segments = []
    for segment in path.split("/"):
        encoded = encoder(segment)
        if "#" in encoded or "?" in encoded:
            encoded = encoded.replace("#", percent_encode_char("#")).replace("?", percent_encode_char("?"))
        segments.append(encoded)
    return "/".join(segments)
