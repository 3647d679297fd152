"""Filesystem path form of URI components."""

import re

_DRIVE_LETTER_PATH = re.compile(r"^/[a-zA-Z]:")


def compute_fs_path(scheme: str, authority: str, path: str, windows_paths: bool) -> str:
    """Derive the filesystem path for a URI.

    Pure string transform: no existence check, no normalization.

    - `file` URIs with an authority become UNC paths, `//authority/path`.
    - A leading `/X:` drive segment gets a lower-case letter; on a
      backslash host the leading slash is dropped as well.
    - On a backslash host every `/` becomes `\\`.

    Examples:
        >>> compute_fs_path("file", "", "/C:/src/app.py", windows_paths=False)
        '/c:/src/app.py'
        >>> compute_fs_path("file", "", "/C:/src/app.py", windows_paths=True)
        'c:\\\\src\\\\app.py'
        >>> compute_fs_path("file", "shares", "/c$/docs", windows_paths=False)
        '//shares/c$/docs'
    """
    if authority and scheme == "file":
        value = f"//{authority}{path}"
    elif _DRIVE_LETTER_PATH.match(path):
        drive = path[1].lower() + path[2:]
        value = drive if windows_paths else "/" + drive
    else:
        value = path

    if windows_paths:
        value = value.replace("/", "\\")
    return value
