"""Host path convention used when deriving filesystem paths."""

from .get_platform_config import get_platform_config
from .PlatformConfig import PlatformConfig
from .set_platform_config import set_platform_config

__all__ = ["PlatformConfig", "get_platform_config", "set_platform_config"]
