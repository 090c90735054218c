"""User domain - events only."""
from .events import UserCreated

__all__ = ["UserCreated"]
