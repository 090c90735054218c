"""Request middleware that records each request before passing it on."""
from typing import Any, Callable, Optional

from design_patterns.domain.base.ports import ConsolePort
from design_patterns.infrastructure.logging.logger import get_logger

RequestHandler = Callable[[str], Any]


class LoggingMiddleware:
    """Decorates a request handler by writing the request to the console first."""

    def __init__(self, console: ConsolePort, next_handler: Optional[RequestHandler] = None):
        """
        Initialize logging middleware.

        Args:
            console: Where request lines are written
            next_handler: Downstream handler; when omitted the middleware is terminal
        """
        self.console = console
        self.next_handler = next_handler
        self.logger = get_logger(__name__)

    def invoke(self, context: str) -> Any:
        """
        Process a request through the middleware.

        Args:
            context: Request description

        Returns:
            Result of the downstream handler, or None when terminal
        """
        self.console.write_line(f"Middleware: {context}")
        if self.next_handler is None:
            return None
        self.logger.debug("Passing request downstream", context=context)
        return self.next_handler(context)

    def __call__(self, context: str) -> Any:
        return self.invoke(context)
