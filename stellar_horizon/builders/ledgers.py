# stellar_horizon/builders/ledgers.py
"""Builders for /ledgers, /ledgers/{sequence} and /fee_stats."""

from dataclasses import dataclass
from typing import Union

from stellar_horizon.builders.base import PagedBuilder, RequestBuilder
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import require_positive_int
from stellar_horizon.models.fee_stats import FeeStats
from stellar_horizon.models.ledgers import Ledger


@dataclass(frozen=True, kw_only=True)
class LedgersRequest(PagedBuilder):
    SHAPE = Ledger

    def _path(self) -> str:
        return "ledgers"

    def build(self) -> RequestDescriptor[Ledger]:
        return self._descriptor()


@dataclass(frozen=True)
class SingleLedgerRequest(RequestBuilder):
    SHAPE = Ledger

    sequence: Union[int, str]

    def __post_init__(self):
        object.__setattr__(self, "sequence", require_positive_int(self.sequence, "ledger sequence"))

    def _path(self) -> str:
        return f"ledgers/{self.sequence}"

    def build(self) -> RequestDescriptor[Ledger]:
        return self._descriptor()


@dataclass(frozen=True)
class FeeStatsRequest(RequestBuilder):
    """Fee statistics of the latest ledgers; takes no parameters."""
    SHAPE = FeeStats

    def _path(self) -> str:
        return "fee_stats"

    def build(self) -> RequestDescriptor[FeeStats]:
        return self._descriptor()
