"""HTTP capability used by the lookup pipeline."""

from typing import Optional, Protocol

import aiohttp
import structlog

from .config import HTTP_TIMEOUT, USER_AGENT
from .models import FetchResponse

log = structlog.get_logger()


class NetworkCapability(Protocol):
    """Anything that can GET a URL and return its status and body."""

    async def get(self, url: str) -> FetchResponse:
        ...


class AiohttpNetwork:
    """Performs one GET per call on a short-lived aiohttp session.

    Transport errors (``aiohttp.ClientError``, ``asyncio.TimeoutError``)
    propagate to the caller; HTTP error statuses are returned, not raised.
    """

    def __init__(self, timeout: Optional[float] = HTTP_TIMEOUT, user_agent: Optional[str] = USER_AGENT):
        self.timeout = timeout
        self.user_agent = user_agent

    def _session(self) -> aiohttp.ClientSession:
        headers = {"User-Agent": self.user_agent} if self.user_agent else None
        if self.timeout is None:
            return aiohttp.ClientSession(headers=headers)
        return aiohttp.ClientSession(
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        )

    async def get(self, url: str) -> FetchResponse:
        async with self._session() as session:
            async with session.get(url) as response:
                text = await response.text(errors="replace")
                log.debug("HTTP GET completed", url=url, status=response.status, size=len(text))
                return FetchResponse(status=response.status, text=text)
