"""Domain ports for infrastructure concerns."""

from .console_port import ConsolePort
from .container_port import ContainerPort
from .http_client_port import HttpClientPort
from .logging_port import LoggingPort

__all__ = [
    "ConsolePort",
    "ContainerPort",
    "HttpClientPort",
    "LoggingPort",
]
