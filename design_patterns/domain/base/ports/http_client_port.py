"""HTTP client port for asynchronous fetches."""
from abc import ABC, abstractmethod


class HttpClientPort(ABC):
    """Port for fetching remote resources as text."""

    @abstractmethod
    async def get_string(self, url: str) -> str:
        """Fetch the resource at ``url`` and return its body as text."""
