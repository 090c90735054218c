"""Post repository interface - contract for post data access."""
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from design_patterns.domain.base.specification import Specification
from .post_aggregate import Post


class PostRepository(ABC):
    """Repository interface for posts."""

    @abstractmethod
    def find_all(self) -> List[Post]:
        """Return every stored post."""

    @abstractmethod
    def find_by_id(self, post_id: Any) -> Optional[Post]:
        """Find post by ID."""

    def find_by_specification(self, specification: Specification[Post]) -> List[Post]:
        """Find posts satisfying the given specification."""
        return specification.filter(self.find_all())
