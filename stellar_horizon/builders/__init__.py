# stellar_horizon/builders/__init__.py
"""Type-state request builders - one entry point per Horizon resource."""

from .accounts import AccountsRequest, FilteredAccountsRequest, SingleAccountRequest
from .assets import AssetsRequest
from .claimable_balances import ClaimableBalancesRequest, SingleClaimableBalanceRequest
from .effects import EffectsRequest, ScopedEffectsRequest
from .ledgers import FeeStatsRequest, LedgersRequest, SingleLedgerRequest
from .liquidity_pools import LiquidityPoolsRequest, SingleLiquidityPoolRequest
from .offers import AccountOffersRequest, OffersRequest, OrderBookRequest, SingleOfferRequest
from .operations import OperationsRequest, ScopedOperationsRequest, SingleOperationRequest
from .paths import (
    PaymentPathsRequest,
    StrictReceivePathsQuery,
    StrictReceivePathsRequest,
    StrictSendPathsQuery,
    StrictSendPathsRequest,
)
from .payments import PaymentsRequest, ScopedPaymentsRequest
from .trades import ScopedTradesRequest, TradeAggregationsRequest, TradesRequest
from .transactions import ScopedTransactionsRequest, SingleTransactionRequest, TransactionsRequest

__all__ = [
    "AccountsRequest",
    "FilteredAccountsRequest",
    "SingleAccountRequest",
    "AssetsRequest",
    "ClaimableBalancesRequest",
    "SingleClaimableBalanceRequest",
    "EffectsRequest",
    "ScopedEffectsRequest",
    "FeeStatsRequest",
    "LedgersRequest",
    "SingleLedgerRequest",
    "LiquidityPoolsRequest",
    "SingleLiquidityPoolRequest",
    "AccountOffersRequest",
    "OffersRequest",
    "OrderBookRequest",
    "SingleOfferRequest",
    "OperationsRequest",
    "ScopedOperationsRequest",
    "SingleOperationRequest",
    "PaymentPathsRequest",
    "StrictReceivePathsQuery",
    "StrictReceivePathsRequest",
    "StrictSendPathsQuery",
    "StrictSendPathsRequest",
    "PaymentsRequest",
    "ScopedPaymentsRequest",
    "ScopedTradesRequest",
    "TradeAggregationsRequest",
    "TradesRequest",
    "ScopedTransactionsRequest",
    "SingleTransactionRequest",
    "TransactionsRequest",
]
