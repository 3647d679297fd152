"""Canonical string form of URI components."""

import re

from ..codec.encode_authority import encode_authority
from ..codec.encode_component import encode_component
from ..codec.encode_noop import encode_noop
from ..codec.encode_path import encode_path

_UPPER_CASE_DRIVE = re.compile(r"^(/)?([A-Z]:)")


def format_uri(scheme: str, authority: str, path: str, query: str, fragment: str, skip_encoding: bool = False) -> str:
    """Serialize decoded components into a URI string.

    The authority is lower-cased and only its part before the first `:` is
    encoded, so ports stay as written; `/`, `?` and `#` in it are always
    escaped. An upper-case drive letter at the start of the path is
    lower-cased. `file` URIs always get a `//` marker.

    Args:
        scheme: Scheme, written as given
        authority: Decoded authority
        path: Decoded path
        query: Decoded query
        fragment: Decoded fragment
        skip_encoding: Leave characters readable (`#` and `?` inside the path
            and `/?#` inside the authority are still escaped)

    Returns:
        URI string
    """
    encoder = encode_noop if skip_encoding else encode_component

    parts: list[str] = []
    if scheme:
        parts.append(f"{scheme}:")
    if authority or scheme == "file":
        parts.append("//")
    if authority:
        authority = authority.lower()
        parts.append(encode_authority(authority, encoder))
    if path:
        match = _UPPER_CASE_DRIVE.match(path)
        if match:
            path = (match.group(1) or "") + match.group(2).lower() + path[match.end() :]
        parts.append(encode_path(path, encoder))
    if query:
        parts.append("?")
        parts.append(encoder(query))
    if fragment:
        parts.append("#")
        parts.append(encoder(fragment))
    return "".join(parts)
