# stellar_horizon/builders/claimable_balances.py
"""Builders for /claimable_balances and /claimable_balances/{id}."""

from dataclasses import dataclass, replace
from typing import Optional, Self, Union

from stellar_horizon.builders.base import PagedBuilder, RequestBuilder
from stellar_horizon.domain.assets import AssetLike, require_asset
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import require_account_id, require_balance_id
from stellar_horizon.models.claimable_balances import ClaimableBalance


@dataclass(frozen=True, kw_only=True)
class ClaimableBalancesRequest(PagedBuilder):
    """Claimable balances; sponsor, asset and claimant filters combine."""
    SHAPE = ClaimableBalance

    sponsor_id: Optional[str] = None
    asset_filter: Optional[str] = None
    claimant_id: Optional[str] = None

    def sponsor(self, account_id: str) -> Self:
        return replace(self, sponsor_id=require_account_id(account_id, "sponsor"))

    def asset(self, asset: Union[AssetLike, str]) -> Self:
        return replace(self, asset_filter=require_asset(asset).canonical())

    def claimant(self, account_id: str) -> Self:
        return replace(self, claimant_id=require_account_id(account_id, "claimant"))

    def _path(self) -> str:
        return "claimable_balances"

    def _filters(self) -> list[tuple[str, str]]:
        query = []
        if self.sponsor_id is not None:
            query.append(("sponsor", self.sponsor_id))
        if self.asset_filter is not None:
            query.append(("asset", self.asset_filter))
        if self.claimant_id is not None:
            query.append(("claimant", self.claimant_id))
        return query

    def build(self) -> RequestDescriptor[ClaimableBalance]:
        return self._descriptor()


@dataclass(frozen=True)
class SingleClaimableBalanceRequest(RequestBuilder):
    SHAPE = ClaimableBalance

    balance_id: str

    def __post_init__(self):
        object.__setattr__(self, "balance_id", require_balance_id(self.balance_id))

    def _path(self) -> str:
        return f"claimable_balances/{self.balance_id}"

    def build(self) -> RequestDescriptor[ClaimableBalance]:
        return self._descriptor()
