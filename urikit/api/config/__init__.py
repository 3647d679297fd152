"""Config API module."""

from .LogConfig import LogConfig
from .UrikitConfig import UrikitConfig

__all__ = ["LogConfig", "UrikitConfig"]
