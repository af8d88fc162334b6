# stellar_horizon/builders/payments.py
"""Builders for /payments and the payments of one account, ledger or transaction."""

from dataclasses import dataclass
from typing import Union

from stellar_horizon.builders.base import (
    IncludeFailedMixin,
    ScopedListBuilder,
    account_scope,
    ledger_scope,
    transaction_scope,
)
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.models.operations import Payment


@dataclass(frozen=True, kw_only=True)
class _PaymentsQuery(IncludeFailedMixin, ScopedListBuilder):
    RESOURCE = "payments"
    SHAPE = Payment

    def _filters(self) -> list[tuple[str, str]]:
        return self._failed_query()

    def build(self) -> RequestDescriptor[Payment]:
        return self._descriptor()


@dataclass(frozen=True, kw_only=True)
class PaymentsRequest(_PaymentsQuery):
    """All payment-like operations, or those of one parent."""

    def for_account(self, account_id: str) -> "ScopedPaymentsRequest":
        return self._carry(ScopedPaymentsRequest, scope=account_scope(account_id))

    def for_ledger(self, sequence: Union[int, str]) -> "ScopedPaymentsRequest":
        return self._carry(ScopedPaymentsRequest, scope=ledger_scope(sequence))

    def for_transaction(self, tx_hash: str) -> "ScopedPaymentsRequest":
        return self._carry(ScopedPaymentsRequest, scope=transaction_scope(tx_hash))


@dataclass(frozen=True, kw_only=True)
class ScopedPaymentsRequest(_PaymentsQuery):
    pass
