"""Post entity - the subject of the repository and specification demos."""
from typing import Optional

from design_patterns.domain.base.entity import Entity


class Post(Entity):
    """A blog post identified by its author."""

    author: str = "Tonio"
    title: Optional[str] = None
