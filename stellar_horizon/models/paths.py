# stellar_horizon/models/paths.py
"""Payment path records (/paths, /paths/strict-receive, /paths/strict-send)."""

from decimal import Decimal
from typing import Optional

from stellar_horizon.models.base import AssetRef, HorizonRecord


class PaymentPath(HorizonRecord):
    source_asset_type: str
    source_asset_code: Optional[str] = None
    source_asset_issuer: Optional[str] = None
    source_amount: Decimal
    destination_asset_type: str
    destination_asset_code: Optional[str] = None
    destination_asset_issuer: Optional[str] = None
    destination_amount: Decimal
    path: list[AssetRef]

    @property
    def source_asset(self) -> AssetRef:
        return AssetRef(
            asset_type=self.source_asset_type,
            asset_code=self.source_asset_code,
            asset_issuer=self.source_asset_issuer,
        )

    @property
    def destination_asset(self) -> AssetRef:
        return AssetRef(
            asset_type=self.destination_asset_type,
            asset_code=self.destination_asset_code,
            asset_issuer=self.destination_asset_issuer,
        )
