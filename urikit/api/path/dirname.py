from ..uri.URI import URI
from .posix_dirname import posix_dirname


def dirname(uri: URI) -> URI:
    """URI whose path is the directory part of `uri.path`.

    Trailing slashes are ignored. When the path has no directory part
    (including an empty path) `uri` itself is returned.
    """
    path = posix_dirname(uri.path)
    if path == ".":
        return uri
    return uri.with_changes(path=path)
