"""User domain events."""
from design_patterns.domain.base.events import DomainEvent


class UserCreated(DomainEvent):
    """Raised when a user account is created."""

    user_id: int
