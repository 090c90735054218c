"""Main application configuration schema."""
from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig


class ServiceSettings(BaseModel):
    """Settings bound through the options wrapper."""

    api_key: str = Field("12345", description="API key shown by the options demo")


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    settings: ServiceSettings = Field(default_factory=ServiceSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
