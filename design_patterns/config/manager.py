"""Unified configuration management for the showcase."""
from __future__ import annotations

import json
import os
import threading
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from design_patterns.config.options import Options
from design_patterns.config.schemas import AppConfig, LoggingConfig, ServiceSettings
from design_patterns.config.utils.env_expansion import expand_env_vars
from design_patterns.domain.core.exceptions import ConfigurationError
from design_patterns.infrastructure.logging.logger import get_logger

T = TypeVar('T')
logger = get_logger(__name__)

ENV_PREFIX = "DESIGN_PATTERNS_"

# Environment variable -> (section, key) overrides
ENV_OVERRIDES = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_FILE": ("logging", "file_path"),
    f"{ENV_PREFIX}API_KEY": ("settings", "api_key"),
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is assembled lazily from, in increasing precedence:
    - schema defaults
    - an optional JSON file (``$VAR`` references in strings are expanded)
    - ``DESIGN_PATTERNS_*`` environment variables
    - explicit overrides passed by the caller
    """

    def __init__(
        self,
        config_file: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        overrides: Optional[Dict[str, Dict[str, Any]]] = None,
    ):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._environ = environ if environ is not None else os.environ
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = self.apply_environment_overrides(config_data)
        config_data = self._merge(config_data, self._overrides)

        try:
            app_config = AppConfig.model_validate(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.debug(
            "Configuration loaded",
            config_file=self._config_file,
            log_level=app_config.logging.level,
        )
        return app_config

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """Read and expand a JSON configuration file."""
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return expand_env_vars(data)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay ``DESIGN_PATTERNS_*`` environment variables onto the data."""
        overrides: Dict[str, Dict[str, Any]] = {}
        for env_name, (section, key) in ENV_OVERRIDES.items():
            if env_name in self._environ:
                overrides.setdefault(section, {})[key] = self._environ[env_name]
        return self._merge(config_data, overrides)

    @staticmethod
    def _merge(base: Dict[str, Any], overrides: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
        merged = dict(base)
        for section, values in overrides.items():
            current = merged.get(section) or {}
            if not isinstance(current, dict):
                raise ConfigurationError(f"Configuration section '{section}' must be an object")
            merged[section] = {**current, **values}
        return merged

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        type_mapping = {
            AppConfig: lambda c: c,
            LoggingConfig: lambda c: c.logging,
            ServiceSettings: lambda c: c.settings,
        }
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return type_mapping[config_type](self.app_config)

    def get_options(self) -> Options[ServiceSettings]:
        """Wrap the service settings in an options holder."""
        return Options.create(self.app_config.settings)

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
