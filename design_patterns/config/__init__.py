"""Configuration package."""
from design_patterns.config.options import Options
from design_patterns.config.schemas import AppConfig, LoggingConfig, ServiceSettings

__all__ = ["AppConfig", "LoggingConfig", "Options", "ServiceSettings"]
