"""Dependency injection errors."""
from typing import Any, List, Optional, Type


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DependencyResolutionError(Exception):
    """Raised when the container cannot produce an instance."""

    def __init__(
        self,
        dependency_type: Any,
        message: str,
        parent_type: Optional[Type] = None,
        parameter_name: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        context = ""
        if parent_type is not None:
            context = f" (required by {_type_name(parent_type)}"
            if parameter_name:
                context += f" parameter '{parameter_name}'"
            context += ")"
        super().__init__(f"{message}{context}")
        self.dependency_type = dependency_type
        self.parent_type = parent_type
        self.parameter_name = parameter_name
        self.cause = cause


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when an abstract type has no registration."""

    def __init__(
        self,
        dependency_type: Any,
        parent_type: Optional[Type] = None,
        parameter_name: Optional[str] = None,
    ):
        super().__init__(
            dependency_type,
            f"No registration found for {_type_name(dependency_type)}",
            parent_type,
            parameter_name,
        )


class UntypedParameterError(DependencyResolutionError):
    """Raised when a constructor parameter has neither annotation nor default."""

    def __init__(self, dependency_type: Any, parameter_name: str):
        super().__init__(
            dependency_type,
            f"Parameter '{parameter_name}' of {_type_name(dependency_type)} "
            "has no type annotation and no default",
            parameter_name=parameter_name,
        )


class CircularDependencyError(DependencyResolutionError):
    """Raised when resolution revisits a type already being resolved."""

    def __init__(self, chain: List[Any]):
        path = " -> ".join(_type_name(t) for t in chain)
        super().__init__(chain[-1], f"Circular dependency detected: {path}")
        self.chain = chain


class InstantiationError(DependencyResolutionError):
    """Raised when a constructor raises during resolution."""

    def __init__(self, dependency_type: Any, message: str, cause: Optional[BaseException] = None):
        super().__init__(dependency_type, message, cause=cause)


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory function fails."""

    def __init__(self, dependency_type: Any, message: str, cause: Optional[BaseException] = None):
        super().__init__(dependency_type, message, cause=cause)
