"""
Dependency Injection Container implementation.

Services are registered against a key type (usually an abstract port) and
resolved on demand. Constructor parameters of resolved classes are filled
in from their type annotations, recursively.
"""
import inspect
import time
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Type, TypeVar, Union, cast, get_args, get_origin, get_type_hints

from design_patterns.domain.base.ports import ContainerPort
from design_patterns.infrastructure.di.exceptions import (
    CircularDependencyError,
    DependencyResolutionError,
    FactoryError,
    InstantiationError,
    UnregisteredDependencyError,
    UntypedParameterError,
)
from design_patterns.infrastructure.logging.logger import get_logger

T = TypeVar('T')
logger = get_logger(__name__)

_PRIMITIVE_TYPES = (str, int, float, bool, bytes, type(None))

# Sentinel for singletons registered but not yet created
_PENDING = object()


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed in {elapsed_time:.4f}s")


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DIContainer(ContainerPort):
    """
    Dependency injection container.

    Registration kinds:
    - instance: a pre-built object returned as-is
    - singleton: created on first resolution, then reused
    - transient: an implementation class instantiated on every resolution
    - factory: a callable invoked with the container on every resolution
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._singletons: Dict[Type, Any] = {}
        self._singleton_builders: Dict[Type, Any] = {}
        self._transients: Dict[Type, Type] = {}
        self._factories: Dict[Type, Callable[["DIContainer"], Any]] = {}

    def is_registered(self, cls: Type) -> bool:
        """
        Check if a type is registered with the container.

        Args:
            cls: Class type to check

        Returns:
            True if the type is registered, False otherwise
        """
        return (
            cls in self._instances or
            cls in self._singletons or
            cls in self._transients or
            cls in self._factories
        )

    def has(self, service_type: Type[T]) -> bool:
        """Check if service is registered in container (ContainerPort interface)."""
        return self.is_registered(service_type)

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """
        Register a specific instance for a type.

        Args:
            cls: Class type to register
            instance: Instance to use
        """
        self._instances[cls] = instance
        logger.debug(f"Registered instance for {_type_name(cls)}")

    def register_singleton(self, cls: Type[T], instance_or_factory: Any = None) -> None:
        """
        Register a singleton type.

        Args:
            cls: Class type to register
            instance_or_factory: None to build ``cls`` itself, an implementation
                class, a factory taking the container, or a pre-created instance
        """
        if instance_or_factory is None:
            self._singletons[cls] = _PENDING
            self._singleton_builders[cls] = cls
            logger.debug(f"Registered singleton type {_type_name(cls)}")
        elif isinstance(instance_or_factory, type):
            implementation = instance_or_factory
            self._singletons[cls] = _PENDING
            self._singleton_builders[cls] = implementation
            logger.debug(f"Registered singleton {_type_name(cls)} -> {_type_name(implementation)}")
        elif callable(instance_or_factory):
            self._singletons[cls] = _PENDING
            self._singleton_builders[cls] = instance_or_factory
            logger.debug(f"Registered singleton factory for {_type_name(cls)}")
        else:
            self._singletons[cls] = instance_or_factory
            logger.debug(f"Registered pre-created singleton for {_type_name(cls)}")

    def register_transient(self, cls: Type[T], implementation: Optional[Type[T]] = None) -> None:
        """
        Register an implementation created anew on every resolution.

        Args:
            cls: Class type to register (usually an abstract port)
            implementation: Concrete class; defaults to ``cls`` itself
        """
        implementation = implementation or cls
        if not isinstance(implementation, type):
            raise TypeError(f"Transient implementation for {_type_name(cls)} must be a class")
        self._transients[cls] = implementation
        logger.debug(f"Registered transient {_type_name(cls)} -> {_type_name(implementation)}")

    def register_factory(self, cls: Type[T], factory: Callable[..., T]) -> None:
        """
        Register a factory function for a type.

        Args:
            cls: Class type to register
            factory: Factory function receiving the container
        """
        self._factories[cls] = factory
        logger.debug(f"Registered factory for {_type_name(cls)}")

    def get(self, cls: Type[T], parent_type: Optional[Type] = None,
            parameter_name: Optional[str] = None,
            dependency_chain: Optional[List[Type]] = None) -> T:
        """
        Get an instance of the specified type.

        Args:
            cls: Class type to get
            parent_type: Optional parent type that requires this dependency
            parameter_name: Optional parameter name in the parent type
            dependency_chain: Types currently being resolved, outermost first

        Returns:
            Instance of the requested type

        Raises:
            DependencyResolutionError: If the dependency cannot be resolved
        """
        chain = list(dependency_chain or [])
        if cls in chain:
            raise CircularDependencyError(chain + [cls])
        chain.append(cls)

        class_name = _type_name(cls)
        logger.debug(f"Resolving dependency: {class_name}" +
                     (f" for {_type_name(parent_type)}" if parent_type else "") +
                     (f" parameter '{parameter_name}'" if parameter_name else ""))

        with timed_operation(f"Resolve {class_name}"):
            if cls in self._instances:
                return cast(T, self._instances[cls])

            if cls in self._singletons:
                if self._singletons[cls] is _PENDING:
                    self._singletons[cls] = self._call_builder(
                        cls, self._singleton_builders[cls], chain
                    )
                    logger.debug(f"Singleton instance created for {class_name}")
                return cast(T, self._singletons[cls])

            if cls in self._transients:
                return cast(T, self._create_instance(self._transients[cls], chain))

            if cls in self._factories:
                return cast(T, self._call_builder(cls, self._factories[cls], chain))

            if inspect.isabstract(cls) or not isinstance(cls, type):
                raise UnregisteredDependencyError(cls, parent_type, parameter_name)

            logger.debug(f"No registration found for {class_name}, attempting direct creation")
            return cast(T, self._create_instance(cls, chain))

    def _call_builder(self, cls: Type, builder: Any,
                      chain: List[Type]) -> Any:
        """Invoke a factory or singleton builder, wrapping unexpected failures."""
        try:
            if isinstance(builder, type):
                return self._create_instance(builder, chain)
            return builder(_ChainedContainer(self, chain))
        except DependencyResolutionError:
            raise
        except Exception as e:
            logger.error(f"Factory failed to create instance of {_type_name(cls)}: {str(e)}")
            raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e

    def _create_instance(self, cls: Type[T], chain: List[Type]) -> T:
        """Instantiate ``cls`` resolving its constructor parameters from the container."""
        kwargs = self._resolve_constructor_arguments(cls, chain)
        try:
            return cls(**kwargs)
        except Exception as e:
            logger.error(f"Failed to create instance of {_type_name(cls)}: {str(e)}")
            raise InstantiationError(cls, f"Constructor of {_type_name(cls)} failed: {str(e)}", e) from e

    def _resolve_constructor_arguments(self, cls: Type, chain: List[Type]) -> Dict[str, Any]:
        init = cls.__init__
        if init is object.__init__:
            return {}

        signature = inspect.signature(init)
        try:
            hints = get_type_hints(init)
        except Exception as e:
            raise InstantiationError(cls, f"Could not read type hints of {_type_name(cls)}: {e}", e) from e

        kwargs: Dict[str, Any] = {}
        for param_name, param in signature.parameters.items():
            if param_name == 'self' or param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue

            has_default = param.default is not inspect.Parameter.empty
            annotation = hints.get(param_name)

            if annotation is None:
                if has_default:
                    continue
                raise UntypedParameterError(cls, param_name)

            dependency_type, optional = self._unwrap_optional(annotation)
            if dependency_type in _PRIMITIVE_TYPES or dependency_type is Any:
                if has_default:
                    continue
                raise UnregisteredDependencyError(dependency_type, cls, param_name)

            if (has_default or optional) and not self._can_resolve(dependency_type):
                if has_default:
                    continue
                kwargs[param_name] = None
                continue

            kwargs[param_name] = self.get(dependency_type, cls, param_name, chain)
        return kwargs

    def _can_resolve(self, cls: Any) -> bool:
        return self.is_registered(cls) or (
            isinstance(cls, type) and not inspect.isabstract(cls)
        )

    @staticmethod
    def _unwrap_optional(annotation: Any):
        """Return ``(inner_type, is_optional)`` for ``Optional[X]``, else ``(annotation, False)``."""
        if get_origin(annotation) is Union:
            args = [a for a in get_args(annotation) if a is not type(None)]
            if len(args) == 1 and len(get_args(annotation)) == 2:
                return args[0], True
        return annotation, False


class _ChainedContainer:
    """Container view handed to factories so nested lookups keep the resolution chain."""

    def __init__(self, container: DIContainer, chain: List[Type]):
        self._container = container
        self._chain = chain

    def get(self, cls: Type[T]) -> T:
        return self._container.get(cls, dependency_chain=self._chain)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._container, name)
