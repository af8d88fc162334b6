# stellar_horizon/models/trades.py
"""Trade and trade aggregation records."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from stellar_horizon.models.base import HorizonRecord, PriceRatio


class Trade(HorizonRecord):
    id: str
    paging_token: str
    ledger_close_time: datetime
    trade_type: str  # "orderbook" or "liquidity_pool"
    offer_id: Optional[str] = None
    liquidity_pool_fee_bp: Optional[int] = None
    base_offer_id: Optional[str] = None
    base_account: Optional[str] = None
    base_liquidity_pool_id: Optional[str] = None
    base_amount: Decimal
    base_asset_type: str
    base_asset_code: Optional[str] = None
    base_asset_issuer: Optional[str] = None
    counter_offer_id: Optional[str] = None
    counter_account: Optional[str] = None
    counter_liquidity_pool_id: Optional[str] = None
    counter_amount: Decimal
    counter_asset_type: str
    counter_asset_code: Optional[str] = None
    counter_asset_issuer: Optional[str] = None
    base_is_seller: bool
    price: Optional[PriceRatio] = None


class TradeAggregation(HorizonRecord):
    """OHLC bucket; ``timestamp`` is the bucket start in milliseconds."""
    timestamp: int
    trade_count: int
    base_volume: Decimal
    counter_volume: Decimal
    avg: Decimal
    high: Decimal
    high_r: PriceRatio
    low: Decimal
    low_r: PriceRatio
    open: Decimal
    open_r: PriceRatio
    close: Decimal
    close_r: PriceRatio
