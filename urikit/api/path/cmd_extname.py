"""Extname command - reports the extension of a URI path."""

from ..StageResult import StageResult
from ._cmd_path_name import _cmd_path_name
from .extname import extname


def cmd_extname(uri: str) -> StageResult:
    """Report the extension of the last URI path segment."""
    return _cmd_path_name(uri, "extension", extname)
