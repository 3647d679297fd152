from . import _platform_slot
from .PlatformConfig import PlatformConfig


def get_platform_config() -> PlatformConfig:
    """Return the process platform config, detecting it on first use."""
    if _platform_slot._PLATFORM_CONFIG is None:
        _platform_slot._PLATFORM_CONFIG = PlatformConfig.detect()
    return _platform_slot._PLATFORM_CONFIG
