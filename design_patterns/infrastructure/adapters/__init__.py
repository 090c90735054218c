"""Infrastructure adapters implementing domain ports."""
from .console_adapter import ConsoleAdapter
from .logging_adapter import LoggingAdapter, NullLogger

__all__ = ["ConsoleAdapter", "LoggingAdapter", "NullLogger"]
