"""Post domain - entity, repository contract and specifications."""
from .post_aggregate import Post
from .repository import PostRepository
from .specifications import PostByAuthorSpecification

__all__ = ["Post", "PostRepository", "PostByAuthorSpecification"]
