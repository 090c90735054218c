"""HTTP client infrastructure."""
from .mock_client import HttpClientMock

__all__ = ["HttpClientMock"]
