from ..uri.URI import URI
from .posix_extname import posix_extname


def extname(uri: URI) -> str:
    """Extension of the last segment of the URI path, or `""` when there is none."""
    return posix_extname(uri.path)
