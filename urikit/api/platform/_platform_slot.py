"""Process-wide platform configuration slot."""

from .PlatformConfig import PlatformConfig

_PLATFORM_CONFIG: PlatformConfig | None = None
