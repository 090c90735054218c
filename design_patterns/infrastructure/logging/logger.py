"""Structured logging setup built on structlog and the stdlib logging module."""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import IO, List, Optional

import structlog

from design_patterns.config.schemas.logging_schema import LoggingConfig
from design_patterns.domain.core.exceptions import ConfigurationError

# Marks handlers installed by setup_logging so a reconfigure only replaces ours
_HANDLER_MARKER = "_design_patterns_handler"

_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _configure_structlog() -> None:
    """Route structlog through stdlib logging so nothing is printed to stdout."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(
    config: Optional[LoggingConfig] = None,
    stream: Optional[IO[str]] = None,
) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application.

    Args:
        config: Logging configuration. Defaults are used when omitted.
        stream: Console stream for log output. Defaults to stderr so that
            stdout carries only demonstration output.

    Returns:
        Configured structlog logger for the package.

    Raises:
        ConfigurationError: If the log file cannot be opened
    """
    config = config or LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    renderer = (
        structlog.processors.JSONRenderer()
        if config.json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )

    handlers: List[logging.Handler] = []

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if config.file_path:
        try:
            # Ensure the log directory exists
            log_dir = os.path.dirname(config.file_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                config.file_path,
                maxBytes=config.max_size_mb * 1024 * 1024,
                backupCount=config.backup_count,
            )
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file {config.file_path}: {e}") from e
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Remove handlers from a previous setup and add new ones
    for handler in root_logger.handlers[:]:
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    for handler in handlers:
        setattr(handler, _HANDLER_MARKER, True)
        root_logger.addHandler(handler)

    logger = get_logger("design_patterns")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_file=config.file_path,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)


_configure_structlog()
