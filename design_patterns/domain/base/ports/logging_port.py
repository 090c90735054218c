"""Logging port for domain and application logging concerns."""
from abc import ABC, abstractmethod
from typing import Any


class LoggingPort(ABC):
    """Port for logging operations."""

    @abstractmethod
    def log(self, message: str, **kwargs: Any) -> None:
        """Log a message at the adapter's default level."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
