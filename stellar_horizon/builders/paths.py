# stellar_horizon/builders/paths.py
"""
Builders for the path finding resources.

Strict receive needs exactly one of source account / source assets, strict
send exactly one of destination account / destination assets. The entry
classes have no ``build()`` until that choice is made.
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional, Self, Union

from stellar_horizon.builders.base import RequestBuilder
from stellar_horizon.domain.assets import AssetLike, join_assets, require_asset
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import require_account_id, require_amount
from stellar_horizon.errors import ConstructionError
from stellar_horizon.models.paths import PaymentPath

Amount = Union[Decimal, str, int]

# Horizon rejects larger asset lists on the path endpoints.
MAX_PATH_ASSETS = 15


def _asset_list(assets: tuple, name: str) -> tuple[AssetLike, ...]:
    if not assets:
        raise ConstructionError(f"{name} needs at least one asset")
    if len(assets) > MAX_PATH_ASSETS:
        raise ConstructionError(f"{name} accepts at most {MAX_PATH_ASSETS} assets")
    return tuple(require_asset(asset, name) for asset in assets)


@dataclass(frozen=True)
class PaymentPathsRequest(RequestBuilder):
    """Legacy /paths: paths from ``source_account`` delivering an exact destination amount."""
    SHAPE = PaymentPath
    PAGED = True

    destination_asset: AssetLike
    destination_amount: Amount
    source_account: str
    destination_account_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "destination_asset", require_asset(self.destination_asset, "destination_asset"))
        object.__setattr__(self, "destination_amount", require_amount(self.destination_amount, "destination_amount"))
        require_account_id(self.source_account, "source_account")

    def destination_account(self, account_id: str) -> Self:
        return replace(self, destination_account_id=require_account_id(account_id, "destination_account"))

    def _path(self) -> str:
        return "paths"

    def _query(self) -> list[tuple[str, str]]:
        query = self.destination_asset.to_query("destination")
        query.append(("destination_amount", self.destination_amount))
        if self.destination_account_id is not None:
            query.append(("destination_account", self.destination_account_id))
        query.append(("source_account", self.source_account))
        return query

    def build(self) -> RequestDescriptor[PaymentPath]:
        return self._descriptor()


@dataclass(frozen=True)
class _StrictReceiveBase(RequestBuilder):
    SHAPE = PaymentPath
    PAGED = True

    destination_asset: AssetLike
    destination_amount: Amount
    destination_account_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "destination_asset", require_asset(self.destination_asset, "destination_asset"))
        object.__setattr__(self, "destination_amount", require_amount(self.destination_amount, "destination_amount"))

    def destination_account(self, account_id: str) -> Self:
        return replace(self, destination_account_id=require_account_id(account_id, "destination_account"))

    def _path(self) -> str:
        return "paths/strict-receive"

    def _query(self) -> list[tuple[str, str]]:
        query = self.destination_asset.to_query("destination")
        query.append(("destination_amount", self.destination_amount))
        if self.destination_account_id is not None:
            query.append(("destination_account", self.destination_account_id))
        return query


@dataclass(frozen=True)
class StrictReceivePathsRequest(_StrictReceiveBase):
    """
    Paths delivering exactly ``destination_amount``.

    Choose the payer with ``from_source_account`` or ``from_source_assets``.
    """

    def from_source_account(self, account_id: str) -> "StrictReceivePathsQuery":
        source = ("source_account", require_account_id(account_id, "source_account"))
        return self._carry(StrictReceivePathsQuery, source=source)

    def from_source_assets(self, *assets: Union[AssetLike, str]) -> "StrictReceivePathsQuery":
        parsed = _asset_list(assets, "source_assets")
        return self._carry(StrictReceivePathsQuery, source=("source_assets", join_assets(list(parsed))))


@dataclass(frozen=True, kw_only=True)
class StrictReceivePathsQuery(_StrictReceiveBase):
    """Strict receive query with its source chosen."""

    source: tuple[str, str]

    def _query(self) -> list[tuple[str, str]]:
        return super()._query() + [self.source]

    def build(self) -> RequestDescriptor[PaymentPath]:
        return self._descriptor()


@dataclass(frozen=True)
class _StrictSendBase(RequestBuilder):
    SHAPE = PaymentPath
    PAGED = True

    source_asset: AssetLike
    source_amount: Amount

    def __post_init__(self):
        object.__setattr__(self, "source_asset", require_asset(self.source_asset, "source_asset"))
        object.__setattr__(self, "source_amount", require_amount(self.source_amount, "source_amount"))

    def _path(self) -> str:
        return "paths/strict-send"

    def _query(self) -> list[tuple[str, str]]:
        query = self.source_asset.to_query("source")
        query.append(("source_amount", self.source_amount))
        return query


@dataclass(frozen=True)
class StrictSendPathsRequest(_StrictSendBase):
    """
    Paths spending exactly ``source_amount``.

    Choose the receiver with ``to_destination_account`` or ``to_destination_assets``.
    """

    def to_destination_account(self, account_id: str) -> "StrictSendPathsQuery":
        destination = ("destination_account", require_account_id(account_id, "destination_account"))
        return self._carry(StrictSendPathsQuery, destination=destination)

    def to_destination_assets(self, *assets: Union[AssetLike, str]) -> "StrictSendPathsQuery":
        parsed = _asset_list(assets, "destination_assets")
        return self._carry(StrictSendPathsQuery, destination=("destination_assets", join_assets(list(parsed))))


@dataclass(frozen=True, kw_only=True)
class StrictSendPathsQuery(_StrictSendBase):
    """Strict send query with its destination chosen."""

    destination: tuple[str, str]

    def _query(self) -> list[tuple[str, str]]:
        return super()._query() + [self.destination]

    def build(self) -> RequestDescriptor[PaymentPath]:
        return self._descriptor()
