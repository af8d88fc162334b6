# stellar_horizon/models/offers.py
"""Offer and order book records."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from stellar_horizon.models.base import AssetRef, HorizonModel, HorizonRecord, PriceRatio


class Offer(HorizonRecord):
    id: str
    paging_token: str
    seller: str
    selling: AssetRef
    buying: AssetRef
    amount: Decimal
    price_r: PriceRatio
    price: Decimal
    last_modified_ledger: int
    last_modified_time: Optional[datetime] = None
    sponsor: Optional[str] = None


class PriceLevel(HorizonModel):
    price_r: PriceRatio
    price: Decimal
    amount: Decimal


class OrderBook(HorizonRecord):
    """Bids and asks of one asset pair; not paged."""
    bids: list[PriceLevel]
    asks: list[PriceLevel]
    base: AssetRef
    counter: AssetRef

    def best_bid(self) -> Optional[PriceLevel]:
        return self.bids[0] if self.bids else None

    def best_ask(self) -> Optional[PriceLevel]:
        return self.asks[0] if self.asks else None
