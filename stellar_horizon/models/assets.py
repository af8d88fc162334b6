# stellar_horizon/models/assets.py
"""Asset statistics records (/assets)."""

from decimal import Decimal
from typing import Optional

from stellar_horizon.models.accounts import AccountFlags
from stellar_horizon.models.base import HorizonModel, HorizonRecord


class AssetAccounts(HorizonModel):
    authorized: int = 0
    authorized_to_maintain_liabilities: int = 0
    unauthorized: int = 0


class AssetBalances(HorizonModel):
    authorized: Decimal = Decimal(0)
    authorized_to_maintain_liabilities: Decimal = Decimal(0)
    unauthorized: Decimal = Decimal(0)


class AssetRecord(HorizonRecord):
    asset_type: str
    asset_code: str
    asset_issuer: str
    paging_token: str
    contract_id: Optional[str] = None
    num_accounts: Optional[int] = None
    num_claimable_balances: int = 0
    num_liquidity_pools: int = 0
    num_contracts: int = 0
    amount: Optional[Decimal] = None
    accounts: AssetAccounts
    balances: AssetBalances
    claimable_balances_amount: Decimal = Decimal(0)
    liquidity_pools_amount: Decimal = Decimal(0)
    contracts_amount: Decimal = Decimal(0)
    flags: AccountFlags
