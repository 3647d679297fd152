from ..uri.URI import URI
from .posix_resolve import posix_resolve


def resolve_path(uri: URI, *paths: str) -> URI:
    """Resolve path fragments against the path of a URI.

    Absolute fragments replace everything before them; relative ones extend
    the current result. The resolved path is normalized and has no trailing
    slash. A relative base path stays relative when the URI has no authority
    and no fragment is absolute. A relative base that resolves to the root
    comes out as `/`, since an empty path cannot replace the current one.

    Args:
        uri: Base URI
        *paths: Fragments to resolve

    Returns:
        URI with the resolved path

    Examples:
        >>> resolve_path(URI.parse("foo://a/foo/bar/"), "/x")
        URI('foo://a/x')
        >>> resolve_path(URI.parse("foo:a/b"), "../c")
        URI('foo:a/c')
    """
    path = uri.path
    keep_relative = not uri.authority and not path.startswith("/")
    if not path.startswith("/"):
        path = "/" + path
    if any(fragment.startswith("/") for fragment in paths):
        keep_relative = False

    resolved = posix_resolve(path, *paths)
    if keep_relative and resolved != "/":
        resolved = resolved[1:]
    return uri.with_changes(path=resolved)
