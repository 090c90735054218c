"""Reactive infrastructure - observables and observers."""
from .observable import IterableObservable, Observable, ObservableMock, Observer, Subscription

__all__ = ["IterableObservable", "Observable", "ObservableMock", "Observer", "Subscription"]
