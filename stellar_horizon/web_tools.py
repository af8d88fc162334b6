# stellar_horizon/web_tools.py
"""aiohttp transport with a lazily created, lock-guarded session."""

import asyncio
import time
from dataclasses import dataclass, field
from typing import Optional

import aiohttp
from loguru import logger

from stellar_horizon.config_reader import HorizonSettings
from stellar_horizon.errors import TransportError


@dataclass(frozen=True)
class WebResponse:
    status: int  # HTTP status code
    body: bytes  # raw response body
    headers: dict[str, str] = field(default_factory=dict)
    elapsed_time: Optional[float] = None  # seconds


class AiohttpTransport:
    """
    GET-only HTTP transport over a shared aiohttp session.

    The session is created on first use and recreated if it was closed.
    Use as an async context manager or call ``close()`` when done.
    """

    def __init__(
            self,
            timeout: float = 30.0,
            user_agent: Optional[str] = None,
            session: Optional[aiohttp.ClientSession] = None,
    ):
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {"Accept": "application/json"}
        if user_agent:
            self.headers["User-Agent"] = user_agent
        self.session = session
        self._owns_session = session is None
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: HorizonSettings) -> "AiohttpTransport":
        return cls(timeout=settings.horizon_timeout, user_agent=settings.horizon_user_agent)

    async def get_session(self) -> aiohttp.ClientSession:
        async with self._lock:
            if self.session is None or self.session.closed:
                self.session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
                self._owns_session = True
                logger.debug("aiohttp session created")
            return self.session

    async def close(self):
        async with self._lock:
            if self._owns_session and self.session and not self.session.closed:
                await self.session.close()
                logger.debug("aiohttp session closed")

    async def __aenter__(self) -> "AiohttpTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def get(self, url: str) -> WebResponse:
        """
        Perform one GET request.

        Args:
            url: absolute URL

        Returns:
            WebResponse with the raw body, whatever the status
        """
        session = await self.get_session()
        start_time = time.monotonic()
        try:
            async with session.get(url) as response:
                body = await response.read()
                return WebResponse(
                    status=response.status,
                    body=body,
                    headers=dict(response.headers),
                    elapsed_time=time.monotonic() - start_time,
                )
        except asyncio.TimeoutError as e:
            raise TransportError(url, "request timed out") from e
        except aiohttp.ClientError as e:
            raise TransportError(url, f"request failed: {e}") from e
