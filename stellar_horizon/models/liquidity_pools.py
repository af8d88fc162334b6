# stellar_horizon/models/liquidity_pools.py
"""Liquidity pool records (/liquidity_pools)."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from stellar_horizon.models.base import HorizonModel, HorizonRecord


class Reserve(HorizonModel):
    asset: str  # "native" or "CODE:ISSUER"
    amount: Decimal


class LiquidityPool(HorizonRecord):
    id: str
    paging_token: str
    fee_bp: int
    type: str
    total_trustlines: int
    total_shares: Decimal
    reserves: list[Reserve]
    last_modified_ledger: int
    last_modified_time: Optional[datetime] = None
