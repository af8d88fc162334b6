# stellar_horizon/interfaces/transport.py
"""HTTP transport interface definition."""

from typing import Protocol

from stellar_horizon.web_tools import WebResponse


class IHttpTransport(Protocol):
    """Interface for the HTTP GET capability the dispatcher needs."""

    async def get(self, url: str) -> WebResponse:
        """
        Perform one GET request.

        Raises TransportError when no response was received.
        """
        ...
