# stellar_horizon/builders/base.py
"""
Shared machinery of the per-resource request builders.

Every builder state is a frozen dataclass. Setters validate first and return a
new instance, so a rejected value leaves the builder untouched. A Filter Group
member setter returns a different class that has no setter for any member of
that group, and only classes whose required parameters are all present define
``build()``.
"""

from dataclasses import dataclass, field, fields, replace
from typing import ClassVar, Optional, Self, TypeVar, Union

from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import (
    MAX_PAGE_LIMIT,
    Order,
    Pagination,
    require_account_id,
    require_balance_id,
    require_cursor,
    require_hash,
    require_limit,
    require_order,
    require_positive_int,
)

BuilderT = TypeVar("BuilderT", bound="RequestBuilder")


@dataclass(frozen=True, kw_only=True)
class RequestBuilder:
    """Base of all builder states."""
    SHAPE: ClassVar[type]
    PAGED: ClassVar[bool] = False

    def _path(self) -> str:
        raise NotImplementedError

    def _query(self) -> list[tuple[str, str]]:
        return []

    def _descriptor(self) -> RequestDescriptor:
        return RequestDescriptor(
            path=self._path(),
            query=tuple(self._query()),
            shape=self.SHAPE,
            paged=self.PAGED,
        )

    def _carry(self, target: type[BuilderT], **changes) -> BuilderT:
        """Move the values both states share into ``target`` and apply ``changes``."""
        own = {f.name for f in fields(self)}
        values = {f.name: getattr(self, f.name) for f in fields(target) if f.init and f.name in own}
        values.update(changes)
        return target(**values)


@dataclass(frozen=True, kw_only=True)
class PagedBuilder(RequestBuilder):
    """Builder of a list resource with cursor, limit and order."""
    PAGED: ClassVar[bool] = True
    MAX_LIMIT: ClassVar[int] = MAX_PAGE_LIMIT

    pagination: Pagination = field(default_factory=Pagination)

    def cursor(self, cursor: Union[str, int]) -> Self:
        """Start after the record with this paging token."""
        return replace(self, pagination=replace(self.pagination, cursor=require_cursor(cursor)))

    def limit(self, limit: int) -> Self:
        return replace(self, pagination=replace(self.pagination, limit=require_limit(limit, self.MAX_LIMIT)))

    def order(self, order: Union[Order, str]) -> Self:
        return replace(self, pagination=replace(self.pagination, order=require_order(order)))

    def _query(self) -> list[tuple[str, str]]:
        return self._filters() + self.pagination.to_query()

    def _filters(self) -> list[tuple[str, str]]:
        return []


@dataclass(frozen=True, kw_only=True)
class ScopedListBuilder(PagedBuilder):
    """
    List resource that Horizon also serves under a parent resource.

    ``scope`` holds the single chosen parent as (collection, id); ``None`` means the
    top-level collection. Setting a scope is a Filter Group transition.
    """
    RESOURCE: ClassVar[str]

    scope: Optional[tuple[str, str]] = None

    def _path(self) -> str:
        if self.scope is None:
            return self.RESOURCE
        collection, ident = self.scope
        return f"{collection}/{ident}/{self.RESOURCE}"


@dataclass(frozen=True, kw_only=True)
class IncludeFailedMixin:
    """``include_failed`` flag of operation, payment and transaction lists."""
    failed: Optional[bool] = None

    def include_failed(self, include: bool = True) -> Self:
        return replace(self, failed=bool(include))

    def _failed_query(self) -> list[tuple[str, str]]:
        if self.failed is None:
            return []
        return [("include_failed", "true" if self.failed else "false")]


# Parent resources a scoped list can hang off, as (collection, id).

def account_scope(account_id: str) -> tuple[str, str]:
    return "accounts", require_account_id(account_id)


def ledger_scope(sequence: Union[int, str]) -> tuple[str, str]:
    return "ledgers", str(require_positive_int(sequence, "ledger sequence"))


def transaction_scope(tx_hash: str) -> tuple[str, str]:
    return "transactions", require_hash(tx_hash, "transaction hash")


def operation_scope(operation_id: Union[int, str]) -> tuple[str, str]:
    return "operations", str(require_positive_int(operation_id, "operation id"))


def liquidity_pool_scope(pool_id: str) -> tuple[str, str]:
    return "liquidity_pools", require_hash(pool_id, "liquidity pool id")


def offer_scope(offer_id: Union[int, str]) -> tuple[str, str]:
    return "offers", str(require_positive_int(offer_id, "offer ID"))


def claimable_balance_scope(balance_id: str) -> tuple[str, str]:
    return "claimable_balances", require_balance_id(balance_id)
