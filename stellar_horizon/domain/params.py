# stellar_horizon/domain/params.py
"""Query parameter value types and the validators shared by all builders."""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union

from stellar_sdk import StrKey

from stellar_horizon.errors import ConstructionError

MAX_PAGE_LIMIT = 200

_HEX_64 = re.compile(r"^[0-9a-fA-F]{64}$")
_DIGITS = re.compile(r"^[0-9]+$")
# 4 byte type discriminant followed by a 32 byte hash
_BALANCE_ID = re.compile(r"^[0-9a-fA-F]{72}$")


class Order(Enum):
    """Sort direction of a list resource."""
    ASC = "asc"
    DESC = "desc"

    def reversed(self) -> "Order":
        return Order.DESC if self is Order.ASC else Order.ASC


class TradeResolution(Enum):
    """Bucket sizes accepted by /trade_aggregations, in milliseconds."""
    ONE_MINUTE = 60_000
    FIVE_MINUTES = 300_000
    FIFTEEN_MINUTES = 900_000
    ONE_HOUR = 3_600_000
    ONE_DAY = 86_400_000
    ONE_WEEK = 604_800_000


@dataclass(frozen=True)
class Pagination:
    """Cursor, limit and order of a list request. ``None`` means Horizon's default."""
    cursor: Optional[str] = None
    limit: Optional[int] = None
    order: Optional[Order] = None

    def to_query(self) -> list[tuple[str, str]]:
        query = []
        if self.cursor is not None:
            query.append(("cursor", self.cursor))
        if self.limit is not None:
            query.append(("limit", str(self.limit)))
        if self.order is not None:
            query.append(("order", self.order.value))
        return query


def require_account_id(value: str, name: str = "account_id") -> str:
    """Check that ``value`` is a Stellar public key (G...)."""
    if not isinstance(value, str) or not value:
        raise ConstructionError(f"{name} must be a non-empty string")
    if len(value) != 56:
        raise ConstructionError(f"{name}: public key must be 56 characters long")
    if not StrKey.is_valid_ed25519_public_key(value):
        raise ConstructionError(f"{name}: {value} is not a valid Stellar public key")
    return value


def require_identifier(value: str, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConstructionError(f"{name} must be a non-empty string")
    return value


def require_hash(value: str, name: str) -> str:
    """Check a 64 character hex id (transaction hash, liquidity pool id)."""
    require_identifier(value, name)
    if len(value) != 64:
        raise ConstructionError(f"{name} must be 64 characters long")
    if not _HEX_64.match(value):
        raise ConstructionError(f"{name} must be hex encoded")
    return value.lower()


def require_positive_int(value: Union[int, str], name: str) -> int:
    """Accept an int or a decimal string and check it is at least 1."""
    if isinstance(value, bool):
        raise ConstructionError(f"invalid {name}: {value!r}")
    if isinstance(value, str):
        if not _DIGITS.match(value):
            raise ConstructionError(f"invalid {name}: {value!r}")
        value = int(value)
    if not isinstance(value, int):
        raise ConstructionError(f"invalid {name}: {value!r}")
    if value < 1:
        raise ConstructionError(f"{name} must be greater than or equal to 1")
    return value


def require_limit(value: int, maximum: int = MAX_PAGE_LIMIT) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConstructionError(f"limit must be an integer, got {value!r}")
    if not 1 <= value <= maximum:
        raise ConstructionError(f"limit must be between 1 and {maximum}, got {value}")
    return value


def require_cursor(value: Union[str, int]) -> str:
    """Paging tokens are opaque; only emptiness is rejected."""
    if isinstance(value, bool):
        raise ConstructionError(f"cursor must be a string, got {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ConstructionError("cursor must not be negative")
        return str(value)
    return require_identifier(value, "cursor")


def require_order(value: Union[Order, str]) -> Order:
    try:
        return Order(value)
    except ValueError:
        raise ConstructionError(f"order must be 'asc' or 'desc', got {value!r}") from None


def require_amount(value: Union[Decimal, str, int], name: str) -> str:
    """Positive amount with at most 7 decimal places, returned in Horizon's string form."""
    if isinstance(value, (float, bool)):
        raise ConstructionError(f"{name} must be a Decimal or a string, got {value!r}")
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ConstructionError(f"{name} is not a number: {value!r}") from None
    if not amount.is_finite() or amount <= 0:
        raise ConstructionError(f"{name} must be positive")
    if amount.as_tuple().exponent < -7:
        raise ConstructionError(f"{name} has more than 7 decimal places")
    return format(amount, "f")


def require_timestamp(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConstructionError(f"{name} must be milliseconds since epoch as an integer")
    if value < 0:
        raise ConstructionError(f"{name} must not be negative")
    return value


def require_balance_id(value: str) -> str:
    require_identifier(value, "balance_id")
    if not _BALANCE_ID.match(value):
        raise ConstructionError("balance_id must be 72 hex characters")
    return value.lower()
