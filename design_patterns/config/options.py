"""Options wrapper - hands a settings object to consumers behind one accessor."""
from typing import Generic, TypeVar

T = TypeVar('T')


class Options(Generic[T]):
    """Read-only holder for a settings instance."""

    def __init__(self, value: T):
        self._value = value

    @classmethod
    def create(cls, value: T) -> "Options[T]":
        """Wrap an already-built settings instance."""
        return cls(value)

    @property
    def value(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"Options({self._value!r})"
