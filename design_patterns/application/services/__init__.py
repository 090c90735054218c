"""Application services."""
from .my_service import MyService, MyServicePort

__all__ = ["MyService", "MyServicePort"]
