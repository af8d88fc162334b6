# stellar_horizon/builders/trades.py
"""Builders for /trades, scoped trade lists and /trade_aggregations."""

from dataclasses import dataclass, replace
from typing import Optional, Self, Union

from stellar_horizon.builders.base import (
    RequestBuilder,
    ScopedListBuilder,
    account_scope,
    liquidity_pool_scope,
    offer_scope,
)
from stellar_horizon.domain.assets import AssetLike, require_asset
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import (
    MAX_PAGE_LIMIT,
    Order,
    TradeResolution,
    require_limit,
    require_order,
    require_timestamp,
)
from stellar_horizon.errors import ConstructionError
from stellar_horizon.models.trades import Trade, TradeAggregation

HOUR_MS = 3_600_000
MAX_OFFSET_MS = 24 * HOUR_MS


@dataclass(frozen=True, kw_only=True)
class _TradesQuery(ScopedListBuilder):
    RESOURCE = "trades"
    SHAPE = Trade

    asset_pair: Optional[tuple[AssetLike, AssetLike]] = None

    def __post_init__(self):
        if self.scope is not None and self.asset_pair is not None:
            raise ConstructionError("trades take either a parent resource or an asset pair")

    def _filters(self) -> list[tuple[str, str]]:
        if self.asset_pair is None:
            return []
        base, counter = self.asset_pair
        return base.to_query("base") + counter.to_query("counter")

    def build(self) -> RequestDescriptor[Trade]:
        return self._descriptor()


@dataclass(frozen=True, kw_only=True)
class TradesRequest(_TradesQuery):
    """
    All trades, or one of: an account's, a pool's, an offer's, or an asset pair's trades.

    The four ``for_*`` setters form one Filter Group.
    """

    def for_account(self, account_id: str) -> "ScopedTradesRequest":
        return self._carry(ScopedTradesRequest, scope=account_scope(account_id))

    def for_liquidity_pool(self, pool_id: str) -> "ScopedTradesRequest":
        return self._carry(ScopedTradesRequest, scope=liquidity_pool_scope(pool_id))

    def for_offer(self, offer_id: Union[int, str]) -> "ScopedTradesRequest":
        return self._carry(ScopedTradesRequest, scope=offer_scope(offer_id))

    def for_asset_pair(
        self,
        base: Union[AssetLike, str],
        counter: Union[AssetLike, str],
    ) -> "ScopedTradesRequest":
        pair = (require_asset(base, "base"), require_asset(counter, "counter"))
        if pair[0] == pair[1]:
            raise ConstructionError("base and counter must be different assets")
        return self._carry(ScopedTradesRequest, asset_pair=pair)


@dataclass(frozen=True, kw_only=True)
class ScopedTradesRequest(_TradesQuery):
    """Trades narrowed by one member of the trades Filter Group."""


@dataclass(frozen=True)
class TradeAggregationsRequest(RequestBuilder):
    """
    OHLC buckets of the base/counter market.

    ``resolution`` is a :class:`TradeResolution` or its value in milliseconds.
    """
    SHAPE = TradeAggregation
    PAGED = True
    MAX_LIMIT = MAX_PAGE_LIMIT

    base: AssetLike
    counter: AssetLike
    resolution: Union[TradeResolution, int]
    start: Optional[int] = None
    end: Optional[int] = None
    offset_ms: Optional[int] = None
    max_records: Optional[int] = None
    sort: Optional[Order] = None

    def __post_init__(self):
        object.__setattr__(self, "base", require_asset(self.base, "base"))
        object.__setattr__(self, "counter", require_asset(self.counter, "counter"))
        if self.base == self.counter:
            raise ConstructionError("base and counter must be different assets")
        try:
            resolution = TradeResolution(self.resolution)
        except ValueError:
            allowed = ", ".join(str(r.value) for r in TradeResolution)
            raise ConstructionError(f"resolution must be one of {allowed}") from None
        object.__setattr__(self, "resolution", resolution)

    def start_time(self, millis: int) -> Self:
        millis = require_timestamp(millis, "start_time")
        if self.end is not None and millis > self.end:
            raise ConstructionError("start_time must not be after end_time")
        return replace(self, start=millis)

    def end_time(self, millis: int) -> Self:
        millis = require_timestamp(millis, "end_time")
        if self.start is not None and millis < self.start:
            raise ConstructionError("end_time must not be before start_time")
        return replace(self, end=millis)

    def offset(self, millis: int) -> Self:
        """Shift of bucket boundaries; whole hours, below the resolution, at most 24h."""
        millis = require_timestamp(millis, "offset")
        if millis % HOUR_MS:
            raise ConstructionError("offset must be a whole number of hours")
        if millis > MAX_OFFSET_MS:
            raise ConstructionError("offset must not exceed 24 hours")
        if millis and millis >= self.resolution.value:
            raise ConstructionError("offset must be smaller than the resolution")
        return replace(self, offset_ms=millis)

    def limit(self, limit: int) -> Self:
        return replace(self, max_records=require_limit(limit, self.MAX_LIMIT))

    def order(self, order: Union[Order, str]) -> Self:
        return replace(self, sort=require_order(order))

    def _path(self) -> str:
        return "trade_aggregations"

    def _query(self) -> list[tuple[str, str]]:
        query = self.base.to_query("base") + self.counter.to_query("counter")
        query.append(("resolution", str(self.resolution.value)))
        if self.start is not None:
            query.append(("start_time", str(self.start)))
        if self.end is not None:
            query.append(("end_time", str(self.end)))
        if self.offset_ms is not None:
            query.append(("offset", str(self.offset_ms)))
        if self.max_records is not None:
            query.append(("limit", str(self.max_records)))
        if self.sort is not None:
            query.append(("order", self.sort.value))
        return query

    def build(self) -> RequestDescriptor[TradeAggregation]:
        return self._descriptor()
