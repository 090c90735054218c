"""Configuration schemas."""
from .app_schema import AppConfig, ServiceSettings
from .logging_schema import LoggingConfig

__all__ = ["AppConfig", "ServiceSettings", "LoggingConfig"]
