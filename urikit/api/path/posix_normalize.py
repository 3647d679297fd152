from ._normalize_segments import _normalize_segments


def posix_normalize(path: str) -> str:
    """Normalize a `/`-separated path the way Node's `path.posix.normalize` does.

    Unlike `posixpath.normpath`, a trailing separator is preserved and a
    leading `//` collapses to a single `/`.

    Examples:
        >>> posix_normalize("/a/foo/bar//x/")
        '/a/foo/bar/x/'
        >>> posix_normalize("a/..")
        '.'
        >>> posix_normalize("/a/n/../../..")
        '/'
    """
    if not path:
        return "."

    is_absolute = path.startswith("/")
    trailing_separator = path.endswith("/")

    normalized = _normalize_segments(path, allow_above_root=not is_absolute)
    if not normalized:
        if is_absolute:
            return "/"
        return "./" if trailing_separator else "."
    if trailing_separator:
        normalized += "/"
    return "/" + normalized if is_absolute else normalized
