"""Basename command - reports the last segment of a URI path."""

from ..StageResult import StageResult
from ._cmd_path_name import _cmd_path_name
from .basename import basename


def cmd_basename(uri: str) -> StageResult:
    """Report the last segment of the URI path."""
    return _cmd_path_name(uri, "basename", basename)
