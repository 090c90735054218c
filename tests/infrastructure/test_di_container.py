from abc import ABC, abstractmethod
from typing import Optional

import pytest

from design_patterns.infrastructure.di import (
    CircularDependencyError,
    DIContainer,
    FactoryError,
    UnregisteredDependencyError,
    UntypedParameterError,
)


class Greeter(ABC):
    @abstractmethod
    def greet(self) -> str:
        ...


class EnglishGreeter(Greeter):
    def greet(self) -> str:
        return "hello"


class Counter:
    created = 0

    def __init__(self):
        Counter.created += 1


class Consumer:
    def __init__(self, greeter: Greeter, counter: Counter):
        self.greeter = greeter
        self.counter = counter


class OptionalConsumer:
    def __init__(self, greeter: Optional[Greeter] = None, name: str = "anon"):
        self.greeter = greeter
        self.name = name


class Untyped:
    def __init__(self, thing):
        self.thing = thing


class NeedsA:
    def __init__(self, b: "NeedsB"):
        self.b = b


class NeedsB:
    def __init__(self, a: NeedsA):
        self.a = a


def test_transient_registration_creates_new_instances():
    container = DIContainer()
    container.register_transient(Greeter, EnglishGreeter)

    first = container.get(Greeter)
    second = container.get(Greeter)

    assert isinstance(first, EnglishGreeter)
    assert first is not second


def test_singleton_is_created_once_and_lazily():
    container = DIContainer()
    before = Counter.created
    container.register_singleton(Counter)

    assert Counter.created == before
    first = container.get(Counter)
    second = container.get(Counter)

    assert first is second
    assert Counter.created == before + 1


def test_singleton_with_implementation_class():
    container = DIContainer()
    container.register_singleton(Greeter, EnglishGreeter)

    assert container.get(Greeter) is container.get(Greeter)
    assert container.get(Greeter).greet() == "hello"


def test_singleton_with_factory_and_instance():
    container = DIContainer()
    greeter = EnglishGreeter()
    container.register_singleton(Greeter, lambda c: greeter)
    container.register_singleton(EnglishGreeter, greeter)

    assert container.get(Greeter) is greeter
    assert container.get(EnglishGreeter) is greeter


def test_registered_instance_is_returned_as_is():
    container = DIContainer()
    greeter = EnglishGreeter()
    container.register_instance(Greeter, greeter)

    assert container.get(Greeter) is greeter
    assert container.has(Greeter)


def test_factory_is_called_per_resolution():
    container = DIContainer()
    calls = []
    container.register_factory(Greeter, lambda c: calls.append(1) or EnglishGreeter())

    container.get(Greeter)
    container.get(Greeter)

    assert len(calls) == 2


def test_constructor_dependencies_are_resolved_from_annotations():
    container = DIContainer()
    container.register_transient(Greeter, EnglishGreeter)

    consumer = container.get(Consumer)

    assert consumer.greeter.greet() == "hello"
    assert isinstance(consumer.counter, Counter)


def test_optional_dependency_falls_back_to_default():
    container = DIContainer()

    consumer = container.get(OptionalConsumer)

    assert consumer.greeter is None
    assert consumer.name == "anon"


def test_optional_dependency_is_resolved_when_registered():
    container = DIContainer()
    container.register_transient(Greeter, EnglishGreeter)

    assert isinstance(container.get(OptionalConsumer).greeter, EnglishGreeter)


def test_unregistered_abstract_type_raises():
    container = DIContainer()

    with pytest.raises(UnregisteredDependencyError):
        container.get(Greeter)


def test_missing_nested_dependency_names_parent():
    container = DIContainer()

    with pytest.raises(UnregisteredDependencyError) as exc_info:
        container.get(Consumer)

    assert exc_info.value.parent_type is Consumer
    assert exc_info.value.parameter_name == "greeter"


def test_untyped_parameter_raises():
    with pytest.raises(UntypedParameterError):
        DIContainer().get(Untyped)


def test_circular_dependency_is_detected():
    with pytest.raises(CircularDependencyError) as exc_info:
        DIContainer().get(NeedsA)

    assert exc_info.value.chain == [NeedsA, NeedsB, NeedsA]


def test_failing_factory_is_wrapped():
    container = DIContainer()

    def broken(c):
        raise RuntimeError("nope")

    container.register_factory(Greeter, broken)

    with pytest.raises(FactoryError) as exc_info:
        container.get(Greeter)

    assert isinstance(exc_info.value.cause, RuntimeError)


def test_has_reports_registrations():
    container = DIContainer()
    assert not container.has(Greeter)

    container.register_transient(Greeter, EnglishGreeter)

    assert container.has(Greeter)
