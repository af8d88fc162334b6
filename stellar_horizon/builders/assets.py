# stellar_horizon/builders/assets.py
"""Builder for /assets."""

from dataclasses import dataclass, replace
from typing import Optional, Self

from stellar_horizon.builders.base import PagedBuilder
from stellar_horizon.domain.assets import require_asset_code
from stellar_horizon.domain.descriptor import RequestDescriptor
from stellar_horizon.domain.params import require_account_id
from stellar_horizon.models.assets import AssetRecord


@dataclass(frozen=True, kw_only=True)
class AssetsRequest(PagedBuilder):
    """Asset statistics, optionally narrowed by code and/or issuer."""
    SHAPE = AssetRecord

    code: Optional[str] = None
    issuer: Optional[str] = None

    def asset_code(self, code: str) -> Self:
        return replace(self, code=require_asset_code(code))

    def asset_issuer(self, issuer: str) -> Self:
        return replace(self, issuer=require_account_id(issuer, "asset_issuer"))

    def _path(self) -> str:
        return "assets"

    def _filters(self) -> list[tuple[str, str]]:
        query = []
        if self.code is not None:
            query.append(("asset_code", self.code))
        if self.issuer is not None:
            query.append(("asset_issuer", self.issuer))
        return query

    def build(self) -> RequestDescriptor[AssetRecord]:
        return self._descriptor()
