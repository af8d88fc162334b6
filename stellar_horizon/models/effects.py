# stellar_horizon/models/effects.py
"""Effect records. Only members shared by the common effect types are declared."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from stellar_horizon.models.base import HorizonRecord


class Effect(HorizonRecord):
    id: str
    paging_token: str
    account: Optional[str] = None
    type: str
    type_i: int
    created_at: datetime
    amount: Optional[Decimal] = None
    starting_balance: Optional[Decimal] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    limit: Optional[Decimal] = None
    trustor: Optional[str] = None
    weight: Optional[int] = None
    public_key: Optional[str] = None
    balance_id: Optional[str] = None
    offer_id: Optional[str] = None
    seller: Optional[str] = None
