import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Loggers live under the `urikit` namespace. Handlers are only installed by
    `configure_logging`, which the CLI calls at start-up; library callers keep
    their own logging setup.
    """
    return logging.getLogger(f"urikit.{name}")
