# stellar_horizon/models/claimable_balances.py
"""Claimable balance records and claim predicates."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

from pydantic import Field

from stellar_horizon.models.base import HorizonModel, HorizonRecord


class Predicate(HorizonModel):
    """
    Claim condition tree as Horizon renders it.

    Exactly one member is set on a well-formed node. ``abs_before`` is kept as
    text because far-future dates fall outside ``datetime``'s range.
    """
    unconditional: Optional[bool] = None
    and_: Optional[list["Predicate"]] = Field(default=None, alias="and")
    or_: Optional[list["Predicate"]] = Field(default=None, alias="or")
    not_: Optional["Predicate"] = Field(default=None, alias="not")
    abs_before: Optional[str] = None
    abs_before_epoch: Optional[int] = None
    rel_before: Optional[int] = None  # seconds after the balance was created

    def is_satisfied(self, at: datetime, created_at: Optional[datetime] = None) -> bool:
        """
        Evaluate the predicate at a moment in time.

        Args:
            at: moment of the claim; naive values are taken as UTC
            created_at: close time of the ledger that created the balance,
                needed only for relative predicates

        Returns:
            True if a claim at ``at`` would be allowed
        """
        at = _as_utc(at)
        if self.unconditional:
            return True
        if self.and_ is not None:
            return all(p.is_satisfied(at, created_at) for p in self.and_)
        if self.or_ is not None:
            return any(p.is_satisfied(at, created_at) for p in self.or_)
        if self.not_ is not None:
            return not self.not_.is_satisfied(at, created_at)
        if self.abs_before_epoch is not None:
            return at.timestamp() < self.abs_before_epoch
        if self.abs_before is not None:
            deadline = datetime.fromisoformat(self.abs_before.replace("Z", "+00:00"))
            return at < _as_utc(deadline)
        if self.rel_before is not None:
            if created_at is None:
                raise ValueError("relative predicate needs the balance creation time")
            return at < _as_utc(created_at) + timedelta(seconds=self.rel_before)
        raise ValueError("empty claim predicate")

    def needs_creation_time(self) -> bool:
        """True if a relative deadline appears anywhere in the tree."""
        if self.rel_before is not None:
            return True
        children = [*(self.and_ or []), *(self.or_ or [])]
        if self.not_ is not None:
            children.append(self.not_)
        return any(child.needs_creation_time() for child in children)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Claimant(HorizonModel):
    destination: str
    predicate: Predicate


class ClaimableBalanceFlags(HorizonModel):
    clawback_enabled: bool = False


class ClaimableBalance(HorizonRecord):
    id: str
    asset: str  # "native" or "CODE:ISSUER"
    amount: Decimal
    sponsor: Optional[str] = None
    last_modified_ledger: int
    last_modified_time: Optional[datetime] = None
    claimants: list[Claimant]
    flags: ClaimableBalanceFlags = Field(default_factory=ClaimableBalanceFlags)
    paging_token: str

    def claimable_by(self, account_id: str, at: datetime, created_at: Optional[datetime] = None) -> bool:
        """
        True if ``account_id`` is a claimant whose predicate holds at ``at``.

        Horizon does not report when a balance was created. Without ``created_at`` a
        claimant whose predicate has a relative deadline counts as unable to claim.
        """
        for claimant in self.claimants:
            if claimant.destination != account_id:
                continue
            if created_at is None and claimant.predicate.needs_creation_time():
                continue
            if claimant.predicate.is_satisfied(at, created_at):
                return True
        return False
