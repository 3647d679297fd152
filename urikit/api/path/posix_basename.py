def posix_basename(path: str) -> str:
    """Last segment of a path, ignoring trailing separators."""
    stripped = path.rstrip("/")
    if not stripped:
        return ""
    return stripped[stripped.rfind("/") + 1 :]
