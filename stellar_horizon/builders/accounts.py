# stellar_horizon/builders/accounts.py
"""Builders for /accounts and /accounts/{id}."""

from dataclasses import dataclass
from typing import Union

from stellar_horizon.builders.base import PagedBuilder, RequestBuilder
from stellar_horizon.domain.assets import AssetLike, require_issued_asset
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import require_account_id, require_hash
from stellar_horizon.errors import ConstructionError
from stellar_horizon.models.accounts import Account

# Horizon requires exactly one of these on /accounts.
ACCOUNT_FILTERS = ("signer", "asset", "sponsor", "liquidity_pool")


@dataclass(frozen=True, kw_only=True)
class AccountsRequest(PagedBuilder):
    """
    Initial state of an /accounts query.

    No filter is chosen yet, so there is no ``build()``. Each ``for_*`` setter
    picks the single filter and returns a :class:`FilteredAccountsRequest`.
    """
    SHAPE = Account

    def for_signer(self, signer: str) -> "FilteredAccountsRequest":
        """Accounts that have ``signer`` as a signer."""
        return self._carry(FilteredAccountsRequest, chosen_filter=("signer", require_account_id(signer, "signer")))

    def for_asset(self, asset: Union[AssetLike, str]) -> "FilteredAccountsRequest":
        """Accounts holding a trustline to ``asset``."""
        return self._carry(FilteredAccountsRequest, chosen_filter=("asset", require_issued_asset(asset).canonical()))

    def for_sponsor(self, sponsor: str) -> "FilteredAccountsRequest":
        """Accounts sponsored by ``sponsor``."""
        return self._carry(FilteredAccountsRequest, chosen_filter=("sponsor", require_account_id(sponsor, "sponsor")))

    def for_liquidity_pool(self, pool_id: str) -> "FilteredAccountsRequest":
        """Accounts participating in the pool."""
        return self._carry(
            FilteredAccountsRequest,
            chosen_filter=("liquidity_pool", require_hash(pool_id, "liquidity_pool")),
        )

    def _path(self) -> str:
        return "accounts"


@dataclass(frozen=True, kw_only=True)
class FilteredAccountsRequest(PagedBuilder):
    """/accounts query with its one filter chosen."""
    SHAPE = Account

    chosen_filter: tuple[str, str]

    def __post_init__(self):
        if self.chosen_filter[0] not in ACCOUNT_FILTERS:
            raise ConstructionError(f"unknown accounts filter {self.chosen_filter[0]}")

    def _path(self) -> str:
        return "accounts"

    def _filters(self) -> list[tuple[str, str]]:
        return [self.chosen_filter]

    def build(self) -> RequestDescriptor[Account]:
        return self._descriptor()


@dataclass(frozen=True)
class SingleAccountRequest(RequestBuilder):
    SHAPE = Account

    account_id: str

    def __post_init__(self):
        require_account_id(self.account_id)

    def _path(self) -> str:
        return f"accounts/{self.account_id}"

    def build(self) -> RequestDescriptor[Account]:
        return self._descriptor()
