# stellar_horizon/models/fee_stats.py
"""Fee statistics (/fee_stats)."""

from decimal import Decimal

from stellar_horizon.models.base import HorizonModel, HorizonRecord


class FeeDistribution(HorizonModel):
    """Percentiles of per-operation fees in stroops over the last ledgers."""
    max: int
    min: int
    mode: int
    p10: int
    p20: int
    p30: int
    p40: int
    p50: int
    p60: int
    p70: int
    p80: int
    p90: int
    p95: int
    p99: int


class FeeStats(HorizonRecord):
    last_ledger: int
    last_ledger_base_fee: int
    ledger_capacity_usage: Decimal
    fee_charged: FeeDistribution
    max_fee: FeeDistribution
