"""Base message infrastructure - commands, notifications and their handlers."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """Base class for messages dispatched through the mediator."""
    model_config = ConfigDict(frozen=True)

    correlation_id: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def validate_message(self) -> None:
        """Hook for message-level validation; raise to reject the message."""


class Command(Message):
    """A request handled by exactly one handler."""


class Notification(Message):
    """A fact broadcast to any number of handlers."""


TCommand = TypeVar('TCommand', bound=Command)
TNotification = TypeVar('TNotification', bound=Notification)
TResult = TypeVar('TResult')


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """Handles one command type."""

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """Handle the command and return its result."""


class NotificationHandler(ABC, Generic[TNotification]):
    """Reacts to one notification type."""

    @abstractmethod
    async def handle(self, notification: TNotification) -> None:
        """React to the notification."""
