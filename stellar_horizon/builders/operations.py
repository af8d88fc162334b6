# stellar_horizon/builders/operations.py
"""Builders for /operations, /operations/{id} and scoped operation lists."""

from dataclasses import dataclass
from typing import Union

from stellar_horizon.builders.base import (
    IncludeFailedMixin,
    RequestBuilder,
    ScopedListBuilder,
    account_scope,
    claimable_balance_scope,
    ledger_scope,
    liquidity_pool_scope,
    transaction_scope,
)
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import require_positive_int
from stellar_horizon.models.operations import Operation


@dataclass(frozen=True, kw_only=True)
class _OperationsQuery(IncludeFailedMixin, ScopedListBuilder):
    RESOURCE = "operations"
    SHAPE = Operation

    def _filters(self) -> list[tuple[str, str]]:
        return self._failed_query()

    def build(self) -> RequestDescriptor[Operation]:
        return self._descriptor()


@dataclass(frozen=True, kw_only=True)
class OperationsRequest(_OperationsQuery):
    """All operations, or the operations of one parent chosen with a ``for_*`` call."""

    def for_account(self, account_id: str) -> "ScopedOperationsRequest":
        return self._carry(ScopedOperationsRequest, scope=account_scope(account_id))

    def for_ledger(self, sequence: Union[int, str]) -> "ScopedOperationsRequest":
        return self._carry(ScopedOperationsRequest, scope=ledger_scope(sequence))

    def for_transaction(self, tx_hash: str) -> "ScopedOperationsRequest":
        return self._carry(ScopedOperationsRequest, scope=transaction_scope(tx_hash))

    def for_liquidity_pool(self, pool_id: str) -> "ScopedOperationsRequest":
        return self._carry(ScopedOperationsRequest, scope=liquidity_pool_scope(pool_id))

    def for_claimable_balance(self, balance_id: str) -> "ScopedOperationsRequest":
        return self._carry(ScopedOperationsRequest, scope=claimable_balance_scope(balance_id))


@dataclass(frozen=True, kw_only=True)
class ScopedOperationsRequest(_OperationsQuery):
    """Operations of the chosen parent."""


@dataclass(frozen=True)
class SingleOperationRequest(RequestBuilder):
    SHAPE = Operation

    operation_id: Union[int, str]

    def __post_init__(self):
        object.__setattr__(self, "operation_id", str(require_positive_int(self.operation_id, "operation id")))

    def _path(self) -> str:
        return f"operations/{self.operation_id}"

    def build(self) -> RequestDescriptor[Operation]:
        return self._descriptor()
