from . import _platform_slot
from .PlatformConfig import PlatformConfig


def set_platform_config(config: PlatformConfig | None) -> None:
    """Replace the process platform config.

    Passing None drops the current value so the next read detects it again.
    """
    _platform_slot._PLATFORM_CONFIG = config
