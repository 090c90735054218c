"""Outcome type - a success value or a failure message, never both.

Callers use this to propagate a binary success/failure signal without
raising. The two variants are separate classes so that a ``Failure`` has
no ``value`` attribute and a ``Success`` has no ``message`` attribute:

    outcome = success(42)
    if outcome.is_success():
        print(outcome.value)
    else:
        print(outcome.message)
"""
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from design_patterns.domain.core.exceptions import OutcomeAccessError

T = TypeVar("T")


class Success(BaseModel, Generic[T]):
    """Successful outcome carrying a value."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T

    def __init__(self, value: T, **data: Any):
        super().__init__(value=value, **data)

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value

    def unwrap_error(self) -> str:
        """Always raises; a success carries no message."""
        raise OutcomeAccessError("Success", "message")

    def unwrap_or(self, default: T) -> T:
        return self.value


class Failure(BaseModel):
    """Failed outcome carrying a message."""
    model_config = ConfigDict(frozen=True)

    message: str

    def __init__(self, message: str, **data: Any):
        super().__init__(message=message, **data)

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Always raises; a failure carries no value."""
        raise OutcomeAccessError("Failure", "value")

    def unwrap_error(self) -> str:
        """Return the failure message."""
        return self.message

    def unwrap_or(self, default: T) -> T:
        return default


Outcome = Union[Success[T], Failure]


def success(value: T) -> Success[T]:
    """Create a successful outcome."""
    return Success(value)


def failure(message: str) -> Failure:
    """Create a failed outcome."""
    return Failure(message)
