# stellar_horizon/builders/effects.py
"""Builders for /effects and the effects of one account, ledger, operation, transaction or pool."""

from dataclasses import dataclass
from typing import Union

from stellar_horizon.builders.base import (
    ScopedListBuilder,
    account_scope,
    ledger_scope,
    liquidity_pool_scope,
    operation_scope,
    transaction_scope,
)
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.models.effects import Effect


@dataclass(frozen=True, kw_only=True)
class _EffectsQuery(ScopedListBuilder):
    RESOURCE = "effects"
    SHAPE = Effect

    def build(self) -> RequestDescriptor[Effect]:
        return self._descriptor()


@dataclass(frozen=True, kw_only=True)
class EffectsRequest(_EffectsQuery):
    """All effects, or, after one ``for_*`` call, the effects of a single parent."""

    def for_account(self, account_id: str) -> "ScopedEffectsRequest":
        return self._carry(ScopedEffectsRequest, scope=account_scope(account_id))

    def for_ledger(self, sequence: Union[int, str]) -> "ScopedEffectsRequest":
        return self._carry(ScopedEffectsRequest, scope=ledger_scope(sequence))

    def for_operation(self, operation_id: Union[int, str]) -> "ScopedEffectsRequest":
        return self._carry(ScopedEffectsRequest, scope=operation_scope(operation_id))

    def for_transaction(self, tx_hash: str) -> "ScopedEffectsRequest":
        return self._carry(ScopedEffectsRequest, scope=transaction_scope(tx_hash))

    def for_liquidity_pool(self, pool_id: str) -> "ScopedEffectsRequest":
        return self._carry(ScopedEffectsRequest, scope=liquidity_pool_scope(pool_id))


@dataclass(frozen=True, kw_only=True)
class ScopedEffectsRequest(_EffectsQuery):
    """Effects of the chosen parent; no other parent can be chosen."""
