"""Path operations scoped to the path component of a URI.

All functions treat `/` as the only separator and never touch a filesystem.
"""

from .basename import basename
from .dirname import dirname
from .extname import extname
from .join_path import join_path
from .PathNameCmdOutput import PathNameCmdOutput
from .posix_basename import posix_basename
from .posix_dirname import posix_dirname
from .posix_extname import posix_extname
from .posix_join import posix_join
from .posix_normalize import posix_normalize
from .posix_resolve import posix_resolve
from .resolve_path import resolve_path

__all__ = [
    "PathNameCmdOutput",
    "basename",
    "dirname",
    "extname",
    "join_path",
    "posix_basename",
    "posix_dirname",
    "posix_extname",
    "posix_join",
    "posix_normalize",
    "posix_resolve",
    "resolve_path",
]
