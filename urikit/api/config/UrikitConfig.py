"""Top-level urikit configuration."""

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ..platform.PlatformConfig import PlatformConfig
from .LogConfig import LogConfig


class UrikitConfig(BaseModel):
    """Configuration for the command-line layer."""

    model_config = ConfigDict(extra="forbid")

    platform: PlatformConfig
    log: LogConfig

    @classmethod
    def load(cls) -> "UrikitConfig":
        """Load and validate config from the environment.

        Reads URIKIT_WINDOWS_PATHS, URIKIT_LOG_LEVEL and URIKIT_LOG_FILE.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        raw: dict[str, Any] = {"log": {}}
        level = os.environ.get("URIKIT_LOG_LEVEL")
        if level:
            raw["log"]["level"] = level.upper()
        log_file = os.environ.get("URIKIT_LOG_FILE")
        if log_file:
            raw["log"]["file"] = log_file

        try:
            raw["platform"] = PlatformConfig.detect()
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the config to a plain dictionary."""
        return {
            "platform": self.platform.model_dump(),
            "log": self.log.model_dump(mode="json"),
        }
