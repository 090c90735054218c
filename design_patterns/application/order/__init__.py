"""Order use cases demonstrated through the mediator."""
from .handlers import CreateOrderHandler, OrderCreatedHandler
from .messages import CreateOrder, OrderCreated

__all__ = ["CreateOrder", "CreateOrderHandler", "OrderCreated", "OrderCreatedHandler"]
