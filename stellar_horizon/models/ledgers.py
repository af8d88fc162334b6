# stellar_horizon/models/ledgers.py
"""Ledger records (/ledgers)."""

from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Optional

from stellar_horizon.models.base import HorizonRecord


class Ledger(HorizonRecord):
    XDR_FIELDS: ClassVar[dict[str, str]] = {"header_xdr": "LedgerHeader"}

    id: str
    paging_token: str
    hash: str
    prev_hash: Optional[str] = None
    sequence: int
    successful_transaction_count: int
    failed_transaction_count: Optional[int] = None
    operation_count: int
    tx_set_operation_count: Optional[int] = None
    closed_at: datetime
    total_coins: Decimal
    fee_pool: Decimal
    base_fee_in_stroops: int
    base_reserve_in_stroops: int
    max_tx_set_size: int
    protocol_version: int
    header_xdr: Optional[str] = None
