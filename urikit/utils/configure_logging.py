import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..api.config.LogConfig import LogConfig

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(log_config: "LogConfig") -> None:
    """Configure unified urikit logging.

    Args:
        log_config: Level and optional log file. Only the first call in a
            process takes effect.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("urikit")
    root_logger.setLevel(log_config.level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_config.file is not None:
        log_config.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_config.file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True
