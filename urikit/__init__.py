"""urikit - RFC 3986 URI value type with POSIX-style path operations."""

from .api.path.basename import basename
from .api.path.dirname import dirname
from .api.path.extname import extname
from .api.path.join_path import join_path
from .api.path.resolve_path import resolve_path
from .api.platform.PlatformConfig import PlatformConfig
from .api.platform.get_platform_config import get_platform_config
from .api.platform.set_platform_config import set_platform_config
from .api.resource_map.ResourceMap import ResourceMap
from .api.uri.URI import URI
from .api.uri.UriComponents import UriComponents
from .api.uri.UriError import UriError

__all__ = [
    "URI",
    "PlatformConfig",
    "ResourceMap",
    "UriComponents",
    "UriError",
    "basename",
    "dirname",
    "extname",
    "get_platform_config",
    "join_path",
    "resolve_path",
    "set_platform_config",
]
