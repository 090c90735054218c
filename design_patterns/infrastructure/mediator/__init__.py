"""Mediator infrastructure."""
from .mediator import BusMiddleware, LoggingBusMiddleware, Mediator, ValidationMiddleware

__all__ = ["BusMiddleware", "LoggingBusMiddleware", "Mediator", "ValidationMiddleware"]
