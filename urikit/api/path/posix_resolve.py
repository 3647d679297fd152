from ._normalize_segments import _normalize_segments


def posix_resolve(*paths: str) -> str:
    """Resolve fragments right to left into an absolute path.

    Processing stops at the first absolute fragment from the right. If no
    fragment is absolute, the path is resolved against `/` rather than a
    working directory. The result has no trailing separator.

    Examples:
        >>> posix_resolve("/foo/bar/", "/x")
        '/x'
        >>> posix_resolve("/a/b", "x/..//y/.")
        '/a/b/y'
    """
    resolved = ""
    for path in reversed(paths):
        if not path:
            continue
        resolved = f"{path}/{resolved}"
        if path.startswith("/"):
            break
    return "/" + _normalize_segments(resolved, allow_above_root=False)
