# stellar_horizon/domain/endpoint.py
"""Base URL of a Horizon deployment."""

from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from stellar_horizon.errors import ConstructionError

if TYPE_CHECKING:
    from stellar_horizon.config_reader import HorizonSettings

TESTNET_HORIZON_URL = "https://horizon-testnet.stellar.org"
PUBLIC_HORIZON_URL = "https://horizon.stellar.org"


@dataclass(frozen=True)
class Endpoint:
    """
    Validated absolute http(s) URL without path, query or fragment.

    A single trailing slash is accepted and stripped.
    """
    base_url: str

    def __post_init__(self):
        url = self.base_url
        if not isinstance(url, str):
            raise ConstructionError(f"URL must start with http:// or https://: {url}")
        try:
            parts = urlsplit(url)
        except ValueError as e:
            raise ConstructionError(f"invalid URL {url}: {e}") from e
        # urlsplit lower-cases the scheme
        if parts.scheme not in ("http", "https") or not url[len(parts.scheme):].startswith("://"):
            raise ConstructionError(f"URL must start with http:// or https://: {url}")
        try:
            parts.port  # raises ValueError on a malformed port
        except ValueError as e:
            raise ConstructionError(f"invalid URL {url}: {e}") from e
        if not parts.hostname:
            raise ConstructionError(f"URL has no host: {url}")
        if parts.path not in ("", "/") or parts.query or parts.fragment:
            raise ConstructionError(f"URL must not have a path, query or fragment: {url}")
        object.__setattr__(self, "base_url", f"{parts.scheme}://{parts.netloc}")

    @classmethod
    def testnet(cls) -> "Endpoint":
        return cls(TESTNET_HORIZON_URL)

    @classmethod
    def public(cls) -> "Endpoint":
        return cls(PUBLIC_HORIZON_URL)

    @classmethod
    def from_settings(cls, settings: "HorizonSettings") -> "Endpoint":
        """Testnet when ``stellar_testnet`` is set, otherwise the configured URL."""
        if settings.stellar_testnet:
            return cls.testnet()
        return cls(settings.horizon_url)

    def __str__(self) -> str:
        return self.base_url
