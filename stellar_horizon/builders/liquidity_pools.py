# stellar_horizon/builders/liquidity_pools.py
"""Builders for /liquidity_pools and /liquidity_pools/{id}."""

from dataclasses import dataclass, replace
from typing import Optional, Self, Union

from stellar_horizon.builders.base import PagedBuilder, RequestBuilder
from stellar_horizon.domain.assets import AssetLike, join_assets, require_asset
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import require_account_id, require_hash
from stellar_horizon.errors import ConstructionError
from stellar_horizon.models.liquidity_pools import LiquidityPool


@dataclass(frozen=True, kw_only=True)
class LiquidityPoolsRequest(PagedBuilder):
    """Liquidity pools, optionally by reserve assets and/or participating account."""
    SHAPE = LiquidityPool

    reserve_assets: tuple[AssetLike, ...] = ()
    account_id: Optional[str] = None

    def reserves(self, *assets: Union[AssetLike, str]) -> Self:
        """Pools holding all of ``assets``; replaces any earlier reserve list."""
        if not assets:
            raise ConstructionError("reserves needs at least one asset")
        parsed = tuple(require_asset(asset, "reserve") for asset in assets)
        if len(set(parsed)) != len(parsed):
            raise ConstructionError("reserves must not repeat an asset")
        return replace(self, reserve_assets=parsed)

    def account(self, account_id: str) -> Self:
        return replace(self, account_id=require_account_id(account_id))

    def _path(self) -> str:
        return "liquidity_pools"

    def _filters(self) -> list[tuple[str, str]]:
        query = []
        if self.reserve_assets:
            query.append(("reserves", join_assets(list(self.reserve_assets))))
        if self.account_id is not None:
            query.append(("account", self.account_id))
        return query

    def build(self) -> RequestDescriptor[LiquidityPool]:
        return self._descriptor()


@dataclass(frozen=True)
class SingleLiquidityPoolRequest(RequestBuilder):
    SHAPE = LiquidityPool

    pool_id: str

    def __post_init__(self):
        object.__setattr__(self, "pool_id", require_hash(self.pool_id, "liquidity pool id"))

    def _path(self) -> str:
        return f"liquidity_pools/{self.pool_id}"

    def build(self) -> RequestDescriptor[LiquidityPool]:
        return self._descriptor()
