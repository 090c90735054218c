"""Service registration for dependency injection.

This module wires every collaborator the demonstration needs:
- Core services (configuration, options, console, logging)
- Domain services (repository, application services)
- Messaging (event aggregator, mediator with its handlers)
- Infrastructure clients (HTTP)
"""
from typing import Optional

from design_patterns.application.order import (
    CreateOrder,
    CreateOrderHandler,
    OrderCreated,
    OrderCreatedHandler,
)
from design_patterns.application.services import MyService, MyServicePort
from design_patterns.config.manager import ConfigurationManager
from design_patterns.config.options import Options
from design_patterns.config.schemas import AppConfig
from design_patterns.domain.base.ports import ConsolePort, HttpClientPort, LoggingPort
from design_patterns.domain.post import PostRepository
from design_patterns.infrastructure.adapters import ConsoleAdapter, LoggingAdapter
from design_patterns.infrastructure.di.container import DIContainer
from design_patterns.infrastructure.event import EventAggregator
from design_patterns.infrastructure.http import HttpClientMock
from design_patterns.infrastructure.mediator import Mediator
from design_patterns.infrastructure.persistence import InMemoryPostRepository


def register_core_services(container: DIContainer, config_manager: ConfigurationManager,
                           console: ConsolePort) -> None:
    """Register configuration, console and logging."""
    container.register_instance(ConfigurationManager, config_manager)
    container.register_factory(AppConfig, lambda c: c.get(ConfigurationManager).app_config)
    container.register_factory(Options, lambda c: c.get(ConfigurationManager).get_options())
    container.register_instance(ConsolePort, console)
    container.register_singleton(LoggingPort, lambda c: LoggingAdapter("design_patterns"))


def register_domain_services(container: DIContainer) -> None:
    """Register repositories and application services."""
    container.register_singleton(PostRepository, InMemoryPostRepository)
    container.register_transient(MyServicePort, MyService)


def create_mediator(container: DIContainer) -> Mediator:
    """Create a mediator with the order handlers registered."""
    mediator = Mediator(logger=container.get(LoggingPort))
    console = container.get(ConsolePort)
    mediator.register_handler(CreateOrder, CreateOrderHandler(console))
    mediator.subscribe(OrderCreated, OrderCreatedHandler(console))
    return mediator


def register_messaging_services(container: DIContainer) -> None:
    """Register the event aggregator and mediator."""
    container.register_singleton(EventAggregator)
    container.register_singleton(Mediator, create_mediator)


def register_infrastructure_services(container: DIContainer) -> None:
    """Register infrastructure clients."""
    container.register_singleton(HttpClientPort, HttpClientMock)


def register_all_services(
    config_manager: Optional[ConfigurationManager] = None,
    console: Optional[ConsolePort] = None,
    container: Optional[DIContainer] = None,
) -> DIContainer:
    """
    Register all services in a dependency injection container.

    Args:
        config_manager: Configuration source; defaults are used when omitted
        console: Output sink; stdout when omitted
        container: Optional container to populate

    Returns:
        Configured container
    """
    container = container or DIContainer()

    # Register services in dependency order
    register_core_services(container, config_manager or ConfigurationManager(), console or ConsoleAdapter())
    register_domain_services(container)
    register_messaging_services(container)
    register_infrastructure_services(container)

    return container
