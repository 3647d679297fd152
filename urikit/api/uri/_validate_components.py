from .UriError import UriError


def _validate_components(authority: str, path: str) -> None:
    """Check the authority/path coupling of RFC 3986 section 3.3.

    Raises:
        UriError: If the combination cannot be written back unambiguously
    """
    if authority and path and not path.startswith("/"):
        raise UriError(
            "authority_path",
            "If a URI contains an authority component, then the path component "
            'must either be empty or begin with a slash ("/") character',
        )
    if not authority and path.startswith("//"):
        raise UriError(
            "double_slash_path",
            "If a URI does not contain an authority component, then the path "
            'cannot begin with two slash characters ("//")',
        )
