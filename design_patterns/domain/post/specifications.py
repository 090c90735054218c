"""Specifications over posts."""
from design_patterns.domain.base.specification import Specification
from .post_aggregate import Post


class PostByAuthorSpecification(Specification[Post]):
    """Satisfied by posts written by the given author."""

    def __init__(self, author: str):
        self.author = author

    def is_satisfied_by(self, candidate: Post) -> bool:
        return candidate.author == self.author
