"""Event infrastructure."""
from .event_aggregator import EventAggregator

__all__ = ["EventAggregator"]
