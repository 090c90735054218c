"""In-process HTTP client double returning canned bodies."""
from typing import Dict, List, Optional

from design_patterns.domain.base.ports import HttpClientPort
from design_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class HttpClientMock(HttpClientPort):
    """
    HttpClientPort that never touches the network.

    Every URL returns ``default_body`` unless a specific body was configured
    in ``responses``. Requested URLs are recorded in ``requests``.
    """

    def __init__(self, responses: Optional[Dict[str, str]] = None, default_body: str = "data"):
        self._responses = dict(responses or {})
        self._default_body = default_body
        self.requests: List[str] = []

    async def get_string(self, url: str) -> str:
        self.requests.append(url)
        body = self._responses.get(url, self._default_body)
        logger.debug("Mock GET", url=url, size=len(body))
        return body
