"""Push-based observable sequences."""
from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

T = TypeVar('T')


class Observer(ABC, Generic[T]):
    """Receives values pushed by an observable."""

    @abstractmethod
    def on_next(self, value: T) -> None:
        """Receive the next value."""

    @abstractmethod
    def on_error(self, error: Exception) -> None:
        """Receive a terminal error; no further notifications follow."""

    @abstractmethod
    def on_completed(self) -> None:
        """Receive successful completion; no further notifications follow."""


class Subscription:
    """Handle returned by ``subscribe``; disposing it runs the release callback once."""

    def __init__(self, on_dispose: Optional[Callable[[], None]] = None):
        self._on_dispose = on_dispose
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Release the subscription. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        if self._on_dispose is not None:
            self._on_dispose()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()


class Observable(ABC, Generic[T]):
    """A source that pushes values to subscribed observers."""

    @abstractmethod
    def subscribe(self, observer: Observer[T]) -> Subscription:
        """Attach an observer and return its subscription."""


class IterableObservable(Observable[T]):
    """
    Cold observable replaying a fixed sequence to each subscriber.

    Values are pushed synchronously during ``subscribe``, followed by
    ``on_completed``. An exception raised while producing or delivering a
    value is sent to ``on_error`` and ends the sequence. Delivery is complete
    by the time ``subscribe`` returns, so the returned subscription has
    nothing left to release.
    """

    def __init__(self, values: Iterable[T]):
        self._values: List[T] = list(values)

    def subscribe(self, observer: Observer[T]) -> Subscription:
        subscription = Subscription()
        try:
            for value in self._values:
                observer.on_next(value)
        except Exception as e:
            observer.on_error(e)
            return subscription
        observer.on_completed()
        return subscription


class ObservableMock(IterableObservable[int]):
    """Observable that emits 42 then completes."""

    def __init__(self):
        super().__init__([42])
