"""Persistence infrastructure."""
from .base_repository import BaseRepository
from .repositories import InMemoryPostRepository

__all__ = ["BaseRepository", "InMemoryPostRepository"]
