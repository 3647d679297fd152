from ..uri.URI import URI
from .posix_basename import posix_basename


def basename(uri: URI) -> str:
    """Last segment of the URI path, or `""` when there is none."""
    return posix_basename(uri.path)
