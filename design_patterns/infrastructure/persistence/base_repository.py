# design_patterns/infrastructure/persistence/base_repository.py
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from design_patterns.domain.base.specification import CriteriaSpecification, Specification
from design_patterns.infrastructure.logging.logger import get_logger

T = TypeVar('T')  # Generic type for entities


class BaseRepository(ABC, Generic[T]):
    """
    Base repository interface with common functionality.

    Provides:
    - Basic lookup operations
    - Specification and criteria queries
    """

    def __init__(self):
        """Initialize base repository."""
        self._lock = threading.Lock()
        self._logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def save(self, entity: T) -> None:
        """
        Save an entity.

        Args:
            entity: Entity to save
        """
        pass

    @abstractmethod
    def find_by_id(self, entity_id: Any) -> Optional[T]:
        """
        Find an entity by ID.

        Args:
            entity_id: ID of the entity to find

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[T]:
        """
        Find all entities.

        Returns:
            List of all entities
        """
        pass

    def exists(self, entity_id: Any) -> bool:
        """Check if an entity exists."""
        return self.find_by_id(entity_id) is not None

    def find_by_specification(self, specification: Specification[T]) -> List[T]:
        """
        Find entities satisfying a specification.

        Args:
            specification: Rule each returned entity must satisfy

        Returns:
            List of matching entities, in storage order
        """
        return specification.filter(self.find_all())

    def find_by_criteria(self, criteria: Dict[str, Any]) -> List[T]:
        """
        Find entities matching criteria.

        Args:
            criteria: Dictionary of field-value pairs to match

        Returns:
            List of matching entities
        """
        return self.find_by_specification(CriteriaSpecification(criteria))

    def find_by_field(self, field: str, value: Any) -> List[T]:
        """Find entities by a specific field value."""
        return self.find_by_criteria({field: value})
