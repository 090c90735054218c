"""In-memory post repository."""
from typing import Any, Iterable, List, Optional

from design_patterns.domain.post import Post, PostRepository
from design_patterns.infrastructure.persistence.base_repository import BaseRepository


class InMemoryPostRepository(BaseRepository[Post], PostRepository):
    """Post repository holding posts in a list, seeded with one post by Tonio."""

    def __init__(self, posts: Optional[Iterable[Post]] = None):
        super().__init__()
        self._posts: List[Post] = list(posts) if posts is not None else [Post()]

    def save(self, entity: Post) -> None:
        with self._lock:
            if entity.id is not None:
                self._posts = [p for p in self._posts if p.id != entity.id]
            self._posts.append(entity)
        self._logger.debug("Saved post", post_id=entity.id, author=entity.author)

    def find_by_id(self, entity_id: Any) -> Optional[Post]:
        for post in self._posts:
            if post.id == entity_id:
                return post
        return None

    def find_all(self) -> List[Post]:
        return list(self._posts)
