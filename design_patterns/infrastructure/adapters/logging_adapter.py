"""Logging port implementations: a structlog adapter and a null object."""
from typing import Any

from design_patterns.domain.base.ports import LoggingPort
from design_patterns.infrastructure.logging.logger import get_logger


class LoggingAdapter(LoggingPort):
    """LoggingPort backed by a structlog logger."""

    def __init__(self, name: str = "design_patterns"):
        self._logger = get_logger(name)

    def log(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, **kwargs)


class NullLogger(LoggingPort):
    """LoggingPort whose methods intentionally do nothing."""

    def log(self, message: str, **kwargs: Any) -> None:
        pass

    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    def info(self, message: str, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    def error(self, message: str, **kwargs: Any) -> None:
        pass
