# stellar_horizon/models/accounts.py
"""Account records (/accounts)."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from stellar_horizon.models.base import HorizonModel, HorizonRecord
from stellar_horizon.xdr_utils import decode_data_value


class Thresholds(HorizonModel):
    low_threshold: int
    med_threshold: int
    high_threshold: int


class AccountFlags(HorizonModel):
    auth_required: bool = False
    auth_revocable: bool = False
    auth_immutable: bool = False
    auth_clawback_enabled: bool = False


class Balance(HorizonModel):
    balance: Decimal
    asset_type: str
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    liquidity_pool_id: Optional[str] = None
    limit: Optional[Decimal] = None
    buying_liabilities: Optional[Decimal] = None
    selling_liabilities: Optional[Decimal] = None
    last_modified_ledger: Optional[int] = None
    is_authorized: Optional[bool] = None
    is_authorized_to_maintain_liabilities: Optional[bool] = None
    is_clawback_enabled: Optional[bool] = None
    sponsor: Optional[str] = None


class Signer(HorizonModel):
    key: str
    weight: int
    type: str
    sponsor: Optional[str] = None


class Account(HorizonRecord):
    id: str
    account_id: str
    sequence: int
    sequence_ledger: Optional[int] = None
    sequence_time: Optional[str] = None
    subentry_count: int
    home_domain: Optional[str] = None
    inflation_destination: Optional[str] = None
    last_modified_ledger: int
    last_modified_time: Optional[datetime] = None
    thresholds: Thresholds
    flags: AccountFlags
    balances: list[Balance]
    signers: list[Signer]
    data: dict[str, str] = Field(default_factory=dict)
    num_sponsoring: int = 0
    num_sponsored: int = 0
    sponsor: Optional[str] = None
    paging_token: str

    def data_value(self, key: str) -> bytes:
        """Raw bytes of a data entry; KeyError when the account has no such entry."""
        return decode_data_value(self.data[key])

    def native_balance(self) -> Optional[Decimal]:
        for balance in self.balances:
            if balance.asset_type == "native":
                return balance.balance
        return None
