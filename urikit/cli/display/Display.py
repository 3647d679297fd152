"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Abstract base for command output."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status message.

        Args:
            message: Status text to display
            kwargs: Implementation-specific options
        """

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., details)
        """

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Emit structured command output.

        Args:
            data: JSON-serializable data
            kwargs: `format` ("json" or "yaml") and `indent`
        """
