"""URI value type."""

from .URI import URI
from .UriCmdOutput import UriCmdOutput
from .UriComponents import UriComponents
from .UriError import UriError

__all__ = ["URI", "UriCmdOutput", "UriComponents", "UriError"]
