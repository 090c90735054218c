"""Dependency injection infrastructure."""
from .container import DIContainer
from .exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    FactoryError,
    InstantiationError,
    UnregisteredDependencyError,
    UntypedParameterError,
)

__all__ = [
    "DIContainer",
    "CircularDependencyError",
    "DependencyResolutionError",
    "FactoryError",
    "InstantiationError",
    "UnregisteredDependencyError",
    "UntypedParameterError",
]
