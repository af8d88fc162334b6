# stellar_horizon/models/base.py
"""Base response models, links and the generic Page."""

from fractions import Fraction
from typing import Any, ClassVar, Generic, Optional, TypeVar

from pydantic import AliasPath, BaseModel, ConfigDict, Field, PrivateAttr

from stellar_horizon.domain.assets import AssetLike, IssuedAsset, NativeAsset
from stellar_horizon.domain.descriptor import RequestDescriptor


class HorizonModel(BaseModel):
    """Frozen model that ignores members it does not declare."""
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class Link(HorizonModel):
    href: str
    templated: bool = False


class PriceRatio(HorizonModel):
    """Exact price as numerator/denominator; Horizon sends ints or strings."""
    n: int
    d: int

    def as_fraction(self) -> Fraction:
        return Fraction(self.n, self.d)


class AssetRef(HorizonModel):
    """Asset as it appears inside response bodies."""
    asset_type: str
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None

    def to_asset(self) -> AssetLike:
        if self.asset_type == "native":
            return NativeAsset()
        return IssuedAsset(self.asset_code or "", self.asset_issuer or "")


class HorizonRecord(HorizonModel):
    """
    One resource record.

    ``XDR_FIELDS`` maps base64 XDR string fields to the stellar_sdk.xdr type they
    hold; the dispatcher fills the decoded values before the record is returned.
    """
    XDR_FIELDS: ClassVar[dict[str, str]] = {}

    links: Optional[dict[str, Link]] = Field(default=None, alias="_links")

    _decoded_xdr: dict[str, Any] = PrivateAttr(default_factory=dict)

    def decoded(self, field: str) -> Any:
        """Decoded XDR value of ``field``, or None when the field was empty."""
        if field not in self.XDR_FIELDS:
            raise KeyError(f"{field} is not an XDR field of {type(self).__name__}")
        return self._decoded_xdr.get(field)

    def with_decoded(self, values: dict[str, Any]) -> "HorizonRecord":
        """Copy of the record carrying decoded XDR values."""
        record = self.model_copy()
        record._decoded_xdr = dict(values)
        return record


RecordT = TypeVar("RecordT", bound=HorizonRecord)


class PageLinks(HorizonModel):
    self_link: Optional[Link] = Field(default=None, alias="self")
    next: Optional[Link] = None
    prev: Optional[Link] = None


class Page(HorizonModel, Generic[RecordT]):
    """
    One page of a list resource.

    ``next_request()`` and ``prev_request()`` return descriptors that can be
    dispatched like builder output. There is no automatic walk over pages.
    """
    records: list[RecordT] = Field(validation_alias=AliasPath("_embedded", "records"))
    links: PageLinks = Field(default_factory=PageLinks, alias="_links")

    _request: Optional[RequestDescriptor] = PrivateAttr(default=None)

    def with_request(self, request: RequestDescriptor) -> "Page[RecordT]":
        page = self.model_copy()
        page._request = request
        return page

    @property
    def request(self) -> Optional[RequestDescriptor]:
        """Descriptor this page was fetched with."""
        return self._request

    def next_request(self) -> Optional[RequestDescriptor]:
        return self._follow(self.links.next)

    def prev_request(self) -> Optional[RequestDescriptor]:
        return self._follow(self.links.prev)

    def self_request(self) -> Optional[RequestDescriptor]:
        return self._follow(self.links.self_link)

    def _follow(self, link: Optional[Link]) -> Optional[RequestDescriptor]:
        if link is None or not link.href:
            return None
        if self._request is None:
            raise ValueError("page was not produced by a dispatcher; it has no request to follow from")
        return self._request.follow(link.href)
