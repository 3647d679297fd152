def _normalize_segments(path: str, allow_above_root: bool) -> str:
    """Resolve `.` and `..` segments and drop empty ones.

    The result carries no leading or trailing slash. Leading `..` segments are
    kept only when `allow_above_root` is set (relative paths); for absolute
    paths they cannot climb past the root and are dropped.
    """
    stack: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if stack and stack[-1] != "..":
                stack.pop()
            elif allow_above_root:
                stack.append("..")
            continue
        stack.append(segment)
    return "/".join(stack)
