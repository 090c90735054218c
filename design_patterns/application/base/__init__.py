"""Application base - message types and handler contracts."""
from .messages import Command, CommandHandler, Message, Notification, NotificationHandler

__all__ = ["Command", "CommandHandler", "Message", "Notification", "NotificationHandler"]
