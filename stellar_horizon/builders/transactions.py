# stellar_horizon/builders/transactions.py
"""Builders for /transactions, /transactions/{hash} and scoped transaction lists."""

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
)
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import require_hash
from stellar_horizon.models.transactions import Transaction


@dataclass(frozen=True, kw_only=True)
class _TransactionsQuery(IncludeFailedMixin, ScopedListBuilder):
    RESOURCE = "transactions"
    SHAPE = Transaction

    def _filters(self) -> list[tuple[str, str]]:
        return self._failed_query()

    def build(self) -> RequestDescriptor[Transaction]:
        return self._descriptor()


@dataclass(frozen=True, kw_only=True)
class TransactionsRequest(_TransactionsQuery):
    """All transactions, or the transactions of one parent chosen with ``for_*``."""

    def for_account(self, account_id: str) -> "ScopedTransactionsRequest":
        return self._carry(ScopedTransactionsRequest, scope=account_scope(account_id))

    def for_ledger(self, sequence: Union[int, str]) -> "ScopedTransactionsRequest":
        return self._carry(ScopedTransactionsRequest, scope=ledger_scope(sequence))

    def for_liquidity_pool(self, pool_id: str) -> "ScopedTransactionsRequest":
        return self._carry(ScopedTransactionsRequest, scope=liquidity_pool_scope(pool_id))

    def for_claimable_balance(self, balance_id: str) -> "ScopedTransactionsRequest":
        return self._carry(ScopedTransactionsRequest, scope=claimable_balance_scope(balance_id))


@dataclass(frozen=True, kw_only=True)
class ScopedTransactionsRequest(_TransactionsQuery):
    """Transactions of the chosen parent."""


@dataclass(frozen=True)
class SingleTransactionRequest(RequestBuilder):
    SHAPE = Transaction

    tx_hash: str

    def __post_init__(self):
        object.__setattr__(self, "tx_hash", require_hash(self.tx_hash, "transaction hash"))

    def _path(self) -> str:
        return f"transactions/{self.tx_hash}"

    def build(self) -> RequestDescriptor[Transaction]:
        return self._descriptor()
