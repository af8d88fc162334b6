# stellar_horizon/domain/assets.py
"""Asset values used as query filters."""

import re
from dataclasses import dataclass
from typing import Union

from stellar_horizon.domain.params import require_account_id
from stellar_horizon.errors import ConstructionError

_ASSET_CODE = re.compile(r"^[a-zA-Z0-9]+$")


def require_asset_code(code: str) -> str:
    if not isinstance(code, str) or not code:
        raise ConstructionError("asset_code must be a non-empty string")
    if len(code) > 12:
        raise ConstructionError("asset_code must be 12 characters or less")
    if not _ASSET_CODE.match(code):
        raise ConstructionError(f"asset_code must be alphanumeric: {code!r}")
    return code


@dataclass(frozen=True)
class NativeAsset:
    """The network's native asset (XLM)."""

    @property
    def asset_type(self) -> str:
        return "native"

    def canonical(self) -> str:
        return "native"

    def to_query(self, prefix: str) -> list[tuple[str, str]]:
        return [(f"{prefix}_asset_type", "native")]


@dataclass(frozen=True)
class IssuedAsset:
    """A credit asset identified by code and issuer."""
    code: str
    issuer: str

    def __post_init__(self):
        require_asset_code(self.code)
        require_account_id(self.issuer, "asset_issuer")

    @property
    def asset_type(self) -> str:
        return "credit_alphanum4" if len(self.code) <= 4 else "credit_alphanum12"

    def canonical(self) -> str:
        return f"{self.code}:{self.issuer}"

    def to_query(self, prefix: str) -> list[tuple[str, str]]:
        return [
            (f"{prefix}_asset_type", self.asset_type),
            (f"{prefix}_asset_code", self.code),
            (f"{prefix}_asset_issuer", self.issuer),
        ]


AssetLike = Union[NativeAsset, IssuedAsset]


def parse_asset(value: str) -> AssetLike:
    """Parse ``native`` or ``CODE:ISSUER``."""
    if value == "native":
        return NativeAsset()
    code, sep, issuer = value.partition(":")
    if not sep:
        raise ConstructionError(f"asset must be 'native' or 'CODE:ISSUER', got {value!r}")
    return IssuedAsset(code, issuer)


def require_asset(value: Union[AssetLike, str], name: str = "asset") -> AssetLike:
    if isinstance(value, (NativeAsset, IssuedAsset)):
        return value
    if isinstance(value, str):
        return parse_asset(value)
    raise ConstructionError(f"{name} must be an asset, got {value!r}")


def require_issued_asset(value: Union[AssetLike, str], name: str = "asset") -> IssuedAsset:
    asset = require_asset(value, name)
    if not isinstance(asset, IssuedAsset):
        raise ConstructionError(f"{name} must be an issued asset, not native")
    return asset


def join_assets(assets: list[AssetLike]) -> str:
    """Comma separated canonical list, as Horizon expects for multi-asset filters."""
    return ",".join(asset.canonical() for asset in assets)
