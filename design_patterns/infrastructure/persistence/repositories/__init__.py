"""Concrete repositories."""
from .post_repository import InMemoryPostRepository

__all__ = ["InMemoryPostRepository"]
