"""Platform configuration."""

import os
import platform

from pydantic import BaseModel, ConfigDict, Field

from ...utils.get_logger import get_logger

logger = get_logger("platform")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class PlatformConfig(BaseModel):
    """Path convention of the host, consumed only by filesystem-path derivation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    windows_paths: bool = Field(..., description="Use backslash separators for filesystem paths")

    @classmethod
    def detect(cls) -> "PlatformConfig":
        """Build the config from URIKIT_WINDOWS_PATHS, else from the running OS.

        Raises:
            ValueError: If URIKIT_WINDOWS_PATHS holds an unrecognized value
        """
        env_value = os.environ.get("URIKIT_WINDOWS_PATHS")
        if env_value is not None and env_value.strip():
            normalized = env_value.strip().lower()
            if normalized in _TRUE_VALUES:
                return cls(windows_paths=True)
            if normalized in _FALSE_VALUES:
                return cls(windows_paths=False)
            raise ValueError(f"Invalid URIKIT_WINDOWS_PATHS value: {env_value!r}")

        system = platform.system()
        logger.debug("Detected host system %s", system)
        return cls(windows_paths=system == "Windows")
