# stellar_horizon/models/__init__.py
"""Response models - one pydantic record type per Horizon resource."""

from .base import AssetRef, HorizonRecord, Link, Page, PageLinks, PriceRatio
from .accounts import Account, AccountFlags, Balance, Signer, Thresholds
from .assets import AssetRecord
from .claimable_balances import ClaimableBalance, Claimant, Predicate
from .effects import Effect
from .fee_stats import FeeDistribution, FeeStats
from .ledgers import Ledger
from .liquidity_pools import LiquidityPool, Reserve
from .offers import Offer, OrderBook, PriceLevel
from .operations import Operation, Payment
from .paths import PaymentPath
from .trades import Trade, TradeAggregation
from .transactions import Preconditions, Transaction

__all__ = [
    "AssetRef",
    "HorizonRecord",
    "Link",
    "Page",
    "PageLinks",
    "PriceRatio",
    "Account",
    "AccountFlags",
    "Balance",
    "Signer",
    "Thresholds",
    "AssetRecord",
    "ClaimableBalance",
    "Claimant",
    "Predicate",
    "Effect",
    "FeeDistribution",
    "FeeStats",
    "Ledger",
    "LiquidityPool",
    "Reserve",
    "Offer",
    "OrderBook",
    "PriceLevel",
    "Operation",
    "Payment",
    "PaymentPath",
    "Trade",
    "TradeAggregation",
    "Preconditions",
    "Transaction",
]
