"""Application bootstrap - DI-based composition root."""
from __future__ import annotations

import asyncio
from typing import Iterable, Optional

from design_patterns.config.manager import ConfigurationManager
from design_patterns.config.schemas import AppConfig
from design_patterns.domain.base.ports import ConsolePort
from design_patterns.infrastructure.adapters import ConsoleAdapter
from design_patterns.infrastructure.di.container import DIContainer
from design_patterns.infrastructure.di.services import register_all_services
from design_patterns.infrastructure.logging.logger import get_logger, setup_logging
from design_patterns.interface.demo_runner import run_sections, select_sections


class Application:
    """DI-based application context with lazy initialization."""

    def __init__(
        self,
        config_manager: Optional[ConfigurationManager] = None,
        console: Optional[ConsolePort] = None,
    ) -> None:
        """Initialize the instance."""
        self.config_manager = config_manager or ConfigurationManager()
        self.console = console or ConsoleAdapter()
        self._container: Optional[DIContainer] = None
        self._initialized = False

        self.logger = get_logger(__name__)

    @property
    def container(self) -> DIContainer:
        if self._container is None:
            self._container = register_all_services(
                config_manager=self.config_manager,
                console=self.console,
            )
        return self._container

    def initialize(self) -> None:
        """Load configuration, set up logging and build the container."""
        if self._initialized:
            return

        app_config = self.config_manager.get_typed(AppConfig)
        setup_logging(app_config.logging)
        self.logger.info("Initializing application", version=app_config.version)

        # Build the container eagerly so registration errors surface here
        _ = self.container
        self._initialized = True

    async def run_async(self, sections: Optional[Iterable[str]] = None) -> None:
        """Run the demonstration, or the named subset of it."""
        self.initialize()
        selected = select_sections(sections)
        self.logger.debug("Running demonstration", sections=[s.key for s in selected])
        await run_sections(self.container, selected)

    def run(self, sections: Optional[Iterable[str]] = None) -> None:
        """Run the demonstration on a fresh event loop."""
        asyncio.run(self.run_async(sections))
