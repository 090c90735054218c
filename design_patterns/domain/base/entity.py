"""Base domain entities - foundation for all domain objects."""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Base class for all domain entities."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[Any] = None

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same type and ID, or are the same object."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return id(self)
        return hash((self.__class__, self.id))
