# stellar_horizon/domain/descriptor.py
"""Finished, immutable description of one Horizon query."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar
from urllib.parse import parse_qsl, quote, urlencode, urlsplit

from stellar_horizon.domain.endpoint import Endpoint

ShapeT = TypeVar("ShapeT")

# Horizon's prev link flips the order, so cursor and order are not part of a query's identity.
_POSITION_KEYS = frozenset({"cursor", "order"})


@dataclass(frozen=True)
class RequestDescriptor(Generic[ShapeT]):
    """
    Resource path, ordered query pairs and the record type expected back.

    ``paged`` marks list resources whose body is a page of ``shape`` records.
    """
    path: str
    query: tuple[tuple[str, str], ...]
    shape: type[ShapeT]
    paged: bool = False

    def url(self, endpoint: Endpoint) -> str:
        """
        Assemble the absolute URL for ``endpoint``.

        Args:
            endpoint: Horizon deployment to address

        Returns:
            URL with the query string encoded in descriptor order
        """
        url = f"{endpoint.base_url}/{quote(self.path, safe='/-_.')}"
        if self.query:
            url = f"{url}?{urlencode(self.query)}"
        return url

    def get(self, key: str) -> Optional[str]:
        for name, value in self.query:
            if name == key:
                return value
        return None

    def follow(self, href: str) -> "RequestDescriptor[ShapeT]":
        """
        Descriptor for a Horizon ``_links`` href with this descriptor's shape.

        The href's host is dropped: the caller's endpoint decides where it is sent.
        """
        href = href.split("{", 1)[0]
        parts = urlsplit(href)
        query = tuple(parse_qsl(parts.query, keep_blank_values=True))
        return RequestDescriptor(
            path=parts.path.strip("/"),
            query=query,
            shape=self.shape,
            paged=self.paged,
        )

    def same_query(self, other: "RequestDescriptor") -> bool:
        """
        Equal resource and parameters, ignoring cursor position and order.

        Horizon writes its default limit into every page link, so a limit present on
        only one side is the server default and does not make the queries differ.
        """
        if self.path != other.path or self.shape is not other.shape or self.paged != other.paged:
            return False
        mine, theirs = self._filters(), other._filters()
        if ("limit" in mine) != ("limit" in theirs):
            mine.pop("limit", None)
            theirs.pop("limit", None)
        return mine == theirs

    def _filters(self) -> dict[str, str]:
        return {
            key: value for key, value in self.query
            if key not in _POSITION_KEYS and value != ""
        }
