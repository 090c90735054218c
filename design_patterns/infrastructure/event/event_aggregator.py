# design_patterns/infrastructure/event/event_aggregator.py
from typing import Any, Callable, Dict, Iterable, List, Type, TypeVar

from design_patterns.infrastructure.logging.logger import get_logger

E = TypeVar('E')


class EventAggregator:
    """
    Publish/subscribe registry keyed by event class.

    Handlers subscribe to a concrete event class and receive only events of
    exactly that class, in subscription order.
    """

    def __init__(self):
        self._handlers: Dict[Type[Any], List[Callable[[Any], None]]] = {}
        self._logger = get_logger(__name__)

    def subscribe(self, event_type: Type[E], handler: Callable[[E], None]) -> Callable[[], None]:
        """
        Register a handler for a specific event type.

        Returns:
            A callable that removes this subscription when invoked
        """
        self._handlers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Registered handler for event type: {event_type.__name__}")

        def unsubscribe() -> None:
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)
                self._logger.debug(f"Removed handler for event type: {event_type.__name__}")

        return unsubscribe

    def handler_count(self, event_type: Type[Any]) -> int:
        return len(self._handlers.get(event_type, []))

    def publish(self, event: Any) -> None:
        """Publish a single event to all handlers registered for its class."""
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        self._logger.debug(f"Publishing event {event_type.__name__} to {len(handlers)} handlers")

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                self._logger.error(
                    f"Error handling event {event_type.__name__}: {str(e)}",
                    exc_info=True,
                )

    def publish_all(self, events: Iterable[Any]) -> None:
        """Publish multiple events."""
        for event in events:
            self.publish(event)
