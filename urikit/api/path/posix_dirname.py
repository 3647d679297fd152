def posix_dirname(path: str) -> str:
    """Directory part of a path, ignoring trailing separators.

    Mirrors Node's `path.posix.dirname`: `.` when there is no directory part,
    `/` for children of the root, `//` for a path starting with exactly two
    slashes and one segment.
    """
    if not path:
        return "."

    has_root = path.startswith("/")
    end = -1
    matched_slash = True
    for i in range(len(path) - 1, 0, -1):
        if path[i] == "/":
            if not matched_slash:
                end = i
                break
        else:
            matched_slash = False

    if end == -1:
        return "/" if has_root else "."
    if has_root and end == 1:
        return "//"
    return path[:end]
