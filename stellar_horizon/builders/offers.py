# stellar_horizon/builders/offers.py
"""Builders for /offers, /offers/{id}, /accounts/{id}/offers and /order_book."""

from dataclasses import dataclass, replace
from typing import Optional, Self, Union

from stellar_horizon.builders.base import PagedBuilder, RequestBuilder
from stellar_horizon.domain.assets import AssetLike, require_asset
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import require_account_id, require_limit, require_positive_int
from stellar_horizon.errors import ConstructionError
from stellar_horizon.models.offers import Offer, OrderBook


@dataclass(frozen=True, kw_only=True)
class OffersRequest(PagedBuilder):
    """Open offers; seller, selling, buying and sponsor filters combine."""
    SHAPE = Offer

    seller_id: Optional[str] = None
    selling_asset: Optional[AssetLike] = None
    buying_asset: Optional[AssetLike] = None
    sponsor_id: Optional[str] = None

    def seller(self, account_id: str) -> Self:
        return replace(self, seller_id=require_account_id(account_id, "seller"))

    def selling(self, asset: Union[AssetLike, str]) -> Self:
        return replace(self, selling_asset=require_asset(asset, "selling"))

    def buying(self, asset: Union[AssetLike, str]) -> Self:
        return replace(self, buying_asset=require_asset(asset, "buying"))

    def sponsor(self, account_id: str) -> Self:
        return replace(self, sponsor_id=require_account_id(account_id, "sponsor"))

    def _path(self) -> str:
        return "offers"

    def _filters(self) -> list[tuple[str, str]]:
        query = []
        if self.seller_id is not None:
            query.append(("seller", self.seller_id))
        if self.selling_asset is not None:
            query.append(("selling", self.selling_asset.canonical()))
        if self.buying_asset is not None:
            query.append(("buying", self.buying_asset.canonical()))
        if self.sponsor_id is not None:
            query.append(("sponsor", self.sponsor_id))
        return query

    def build(self) -> RequestDescriptor[Offer]:
        return self._descriptor()


@dataclass(frozen=True)
class AccountOffersRequest(PagedBuilder):
    """Offers created by one account."""
    SHAPE = Offer

    account_id: str

    def __post_init__(self):
        require_account_id(self.account_id)

    def _path(self) -> str:
        return f"accounts/{self.account_id}/offers"

    def build(self) -> RequestDescriptor[Offer]:
        return self._descriptor()


@dataclass(frozen=True)
class SingleOfferRequest(RequestBuilder):
    SHAPE = Offer

    offer_id: Union[int, str]

    def __post_init__(self):
        object.__setattr__(self, "offer_id", require_positive_int(self.offer_id, "offer ID"))

    def _path(self) -> str:
        return f"offers/{self.offer_id}"

    def build(self) -> RequestDescriptor[Offer]:
        return self._descriptor()


@dataclass(frozen=True)
class OrderBookRequest(RequestBuilder):
    """Bids and asks for selling/buying; both assets are required."""
    SHAPE = OrderBook
    MAX_LIMIT = 200

    selling: AssetLike
    buying: AssetLike
    depth: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "selling", require_asset(self.selling, "selling"))
        object.__setattr__(self, "buying", require_asset(self.buying, "buying"))
        if self.selling == self.buying:
            raise ConstructionError("selling and buying must be different assets")

    def limit(self, limit: int) -> Self:
        """Number of price levels per side."""
        return replace(self, depth=require_limit(limit, self.MAX_LIMIT))

    def _path(self) -> str:
        return "order_book"

    def _query(self) -> list[tuple[str, str]]:
        query = self.selling.to_query("selling") + self.buying.to_query("buying")
        if self.depth is not None:
            query.append(("limit", str(self.depth)))
        return query

    def build(self) -> RequestDescriptor[OrderBook]:
        return self._descriptor()
