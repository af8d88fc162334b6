# stellar_horizon/models/operations.py
"""Operation and payment records."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from stellar_horizon.models.base import AssetRef, HorizonRecord


class Operation(HorizonRecord):
    """
    Operation record with the members common to all operation types.

    Type specific members that are not declared here are ignored.
    """
    id: str
    paging_token: str
    transaction_successful: bool
    source_account: str
    source_account_muxed: Optional[str] = None
    type: str
    type_i: int
    created_at: datetime
    transaction_hash: str
    sponsor: Optional[str] = None


class Payment(Operation):
    """Record of /payments: payment, create_account, path payments and account_merge."""
    amount: Optional[Decimal] = None
    asset_type: Optional[str] = None
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    from_account: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    funder: Optional[str] = None
    account: Optional[str] = None
    starting_balance: Optional[Decimal] = None
    into: Optional[str] = None
    source_amount: Optional[Decimal] = None
    source_asset_type: Optional[str] = None
    source_asset_code: Optional[str] = None
    source_asset_issuer: Optional[str] = None
    path: list[AssetRef] = Field(default_factory=list)

    @property
    def destination(self) -> Optional[str]:
        """Receiving account whatever the payment type."""
        return self.to or self.account or self.into
