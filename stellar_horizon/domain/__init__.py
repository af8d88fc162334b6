# stellar_horizon/domain/__init__.py
"""Query parameter model - endpoint, assets, pagination and request descriptors."""

from .assets import AssetLike, IssuedAsset, NativeAsset, parse_asset
from .descriptor import RequestDescriptor
from .endpoint import Endpoint, PUBLIC_HORIZON_URL, TESTNET_HORIZON_URL
from .params import MAX_PAGE_LIMIT, Order, Pagination, TradeResolution

__all__ = [
    "AssetLike",
    "IssuedAsset",
    "NativeAsset",
    "parse_asset",
    "RequestDescriptor",
    "Endpoint",
    "PUBLIC_HORIZON_URL",
    "TESTNET_HORIZON_URL",
    "MAX_PAGE_LIMIT",
    "Order",
    "Pagination",
    "TradeResolution",
]
