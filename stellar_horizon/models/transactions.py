# stellar_horizon/models/transactions.py
"""Transaction records (/transactions)."""

from datetime import datetime
from typing import Any, ClassVar, Optional

from pydantic import Field

from stellar_horizon.models.base import HorizonModel, HorizonRecord


class TimeBounds(HorizonModel):
    min_time: Optional[int] = None
    max_time: Optional[int] = None


class LedgerBounds(HorizonModel):
    min_ledger: Optional[int] = None
    max_ledger: Optional[int] = None


class Preconditions(HorizonModel):
    timebounds: Optional[TimeBounds] = None
    ledgerbounds: Optional[LedgerBounds] = None
    min_account_sequence: Optional[str] = None
    min_account_sequence_age: Optional[str] = None
    min_account_sequence_ledger_gap: Optional[int] = None
    extra_signers: list[str] = Field(default_factory=list)


class Transaction(HorizonRecord):
    XDR_FIELDS: ClassVar[dict[str, str]] = {
        "envelope_xdr": "TransactionEnvelope",
        "result_xdr": "TransactionResult",
        "result_meta_xdr": "TransactionMeta",
        "fee_meta_xdr": "LedgerEntryChanges",
    }

    id: str
    paging_token: str
    successful: bool
    hash: str
    ledger: int
    created_at: datetime
    source_account: str
    source_account_sequence: int
    fee_account: str
    fee_charged: int
    max_fee: int
    operation_count: int
    envelope_xdr: Optional[str] = None
    result_xdr: Optional[str] = None
    result_meta_xdr: Optional[str] = None
    fee_meta_xdr: Optional[str] = None
    memo_type: str
    memo: Optional[str] = None
    memo_bytes: Optional[str] = None
    signatures: list[str] = Field(default_factory=list)
    valid_after: Optional[str] = None
    valid_before: Optional[str] = None
    preconditions: Optional[Preconditions] = None
    fee_bump_transaction: Optional[dict[str, Any]] = None
    inner_transaction: Optional[dict[str, Any]] = None

    @property
    def envelope(self) -> Any:
        """Decoded ``TransactionEnvelope``."""
        return self.decoded("envelope_xdr")

    @property
    def result(self) -> Any:
        """Decoded ``TransactionResult``."""
        return self.decoded("result_xdr")
