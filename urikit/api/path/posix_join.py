from .posix_normalize import posix_normalize


def posix_join(*paths: str) -> str:
    """Join path fragments with `/` and normalize the result.

    Empty fragments are skipped; joining nothing gives `.`.
    """
    joined = "/".join(path for path in paths if path)
    if not joined:
        return "."
    return posix_normalize(joined)
