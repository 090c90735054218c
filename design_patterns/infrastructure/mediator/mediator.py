"""
Mediator implementation.

The mediator decouples message senders from handlers. Commands go to
exactly one registered handler; notifications fan out to every handler
registered for their type. Both paths run through a middleware chain so
cross-cutting concerns like logging and validation stay out of handlers.
"""
import time
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from design_patterns.application.base.messages import (
    Command,
    CommandHandler,
    Message,
    Notification,
    NotificationHandler,
)
from design_patterns.domain.base.ports import LoggingPort
from design_patterns.domain.core.exceptions import HandlerNotFoundError
from design_patterns.infrastructure.adapters.logging_adapter import NullLogger

NextHandler = Callable[[], Awaitable[Any]]


class BusMiddleware(ABC):
    """Base class for bus middleware."""

    @abstractmethod
    async def execute(self, message: Any, next_handler: NextHandler) -> Any:
        """Execute middleware logic."""
        pass


class LoggingBusMiddleware(BusMiddleware):
    """Middleware for logging bus operations."""

    def __init__(self, logger: LoggingPort):
        self.logger = logger

    async def execute(self, message: Any, next_handler: NextHandler) -> Any:
        """Log bus operations."""
        message_type = type(message).__name__
        start_time = time.time()

        self.logger.debug(f"Executing {message_type}")

        try:
            result = await next_handler()
            execution_time = time.time() - start_time
            self.logger.debug(f"Completed {message_type} in {execution_time:.3f}s")
            return result
        except Exception as e:
            execution_time = time.time() - start_time
            self.logger.error(f"Failed {message_type} after {execution_time:.3f}s: {str(e)}")
            raise


class ValidationMiddleware(BusMiddleware):
    """Middleware for validating messages."""

    async def execute(self, message: Any, next_handler: NextHandler) -> Any:
        """Validate message before processing."""
        if message is None:
            raise ValueError("Message cannot be None")

        if isinstance(message, Message):
            message.validate_message()

        return await next_handler()


class Mediator:
    """Dispatches commands and notifications to registered handlers."""

    def __init__(self, logger: Optional[LoggingPort] = None):
        self.logger = logger or NullLogger()
        self.middleware: List[BusMiddleware] = []
        self._command_handlers: Dict[Type[Command], CommandHandler] = {}
        self._notification_handlers: Dict[Type[Notification], List[NotificationHandler]] = {}

        # Add default middleware
        self.add_middleware(LoggingBusMiddleware(self.logger))
        self.add_middleware(ValidationMiddleware())

    def add_middleware(self, middleware: BusMiddleware) -> None:
        """Add middleware to the bus; earlier middleware wraps later middleware."""
        self.middleware.append(middleware)
        self.logger.debug(f"Added middleware: {type(middleware).__name__}")

    def register_handler(self, command_type: Type[Command], handler: CommandHandler) -> None:
        """Register the handler for a command type, replacing any previous one."""
        self._command_handlers[command_type] = handler
        self.logger.debug(f"Registered handler for command: {command_type.__name__}")

    def subscribe(self, notification_type: Type[Notification], handler: NotificationHandler) -> None:
        """Add a handler for a notification type."""
        self._notification_handlers.setdefault(notification_type, []).append(handler)
        self.logger.debug(f"Subscribed handler to notification: {notification_type.__name__}")

    async def send(self, command: Command) -> Any:
        """
        Send a command to its handler through the middleware chain.

        Args:
            command: Command to execute

        Returns:
            Handler result

        Raises:
            HandlerNotFoundError: If no handler is registered for the command type
        """
        handler = self._command_handlers.get(type(command))
        if handler is None:
            self.logger.error(f"No handler registered for command: {type(command).__name__}")
            raise HandlerNotFoundError(type(command).__name__)

        async def final_handler() -> Any:
            return await handler.handle(command)

        return await self._run_with_middleware(command, final_handler)

    async def publish(self, notification: Notification) -> None:
        """Publish a notification to every handler registered for its type, in order."""
        handlers = list(self._notification_handlers.get(type(notification), []))

        async def final_handler() -> None:
            for handler in handlers:
                await handler.handle(notification)

        await self._run_with_middleware(notification, final_handler)

    async def _run_with_middleware(self, message: Message, final_handler: NextHandler) -> Any:
        """Execute the final handler wrapped by the middleware chain."""
        handler = final_handler
        for middleware in reversed(self.middleware):
            handler = self._wrap(middleware, message, handler)
        return await handler()

    @staticmethod
    def _wrap(middleware: BusMiddleware, message: Message, next_handler: NextHandler) -> NextHandler:
        async def wrapped() -> Any:
            return await middleware.execute(message, next_handler)
        return wrapped
