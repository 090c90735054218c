"""Specification base classes - composable boolean rules over entities."""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Generic, Iterable, List, TypeVar

T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    A named rule that a candidate either satisfies or not.

    Specifications compose with ``&``, ``|`` and ``~``:

        spec = PostByAuthorSpecification("Tonio") & ~PostByAuthorSpecification("Ada")
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """Return True if the candidate satisfies this rule."""

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "Specification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "Specification[T]":
        return NotSpecification(self)

    def filter(self, candidates: Iterable[T]) -> List[T]:
        """Return the candidates that satisfy this rule, in input order."""
        return [candidate for candidate in candidates if self.is_satisfied_by(candidate)]


class AndSpecification(Specification[T]):
    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)


class OrSpecification(Specification[T]):
    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)


class NotSpecification(Specification[T]):
    def __init__(self, inner: Specification[T]):
        self.inner = inner

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.inner.is_satisfied_by(candidate)


class PredicateSpecification(Specification[T]):
    """Wrap a plain predicate function as a specification."""

    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self.predicate(candidate))


class CriteriaSpecification(Specification[Any]):
    """Match when every field-value pair in the criteria equals the candidate's attribute."""

    def __init__(self, criteria: Dict[str, Any]):
        self.criteria = dict(criteria)

    def is_satisfied_by(self, candidate: Any) -> bool:
        return all(
            getattr(candidate, field, None) == value
            for field, value in self.criteria.items()
        )
