from ..uri.URI import URI
from .posix_join import posix_join


def join_path(uri: URI, *paths: str) -> URI:
    """Join path fragments onto the path of a URI.

    `/` is the separator. The joined path is normalized: `.` and `..`
    segments are resolved, repeated slashes collapse, trailing slashes are
    kept. A URI with an authority keeps a rooted path. Scheme, authority,
    query and fragment are taken from `uri`.

    Args:
        uri: Base URI
        *paths: Fragments to append

    Returns:
        URI with the joined path (or `uri` itself if the path is unchanged)

    Examples:
        >>> join_path(URI.parse("foo://a/foo/bar/"), "x/y/z", "..")
        URI('foo://a/foo/bar/x/y')
    """
    if not uri.path and not any(paths):
        return uri

    base = uri.path
    if uri.authority and not base:
        base = "/"
    return uri.with_changes(path=posix_join(base, *paths))
