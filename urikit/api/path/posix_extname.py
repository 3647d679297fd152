from .posix_basename import posix_basename


def posix_extname(path: str) -> str:
    """Extension of the last path segment, from its last `.` on.

    A segment whose only dot is its first character (`.profile`) and the
    segment `..` have no extension. A trailing dot counts (`file.` gives `.`).
    """
    name = posix_basename(path)
    dot = name.rfind(".")
    if dot <= 0 or name == "..":
        return ""
    return name[dot:]
