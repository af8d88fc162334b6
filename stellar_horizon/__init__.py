# stellar_horizon/__init__.py
"""Typed async client for the Stellar Horizon query API."""

from loguru import logger

from .builders import *  # noqa: F401,F403
from .builders import __all__ as _builders_all
from .client import HorizonClient
from .config_reader import HorizonSettings, load_settings
from .dispatcher import Dispatcher
from .domain import Endpoint, IssuedAsset, NativeAsset, Order, RequestDescriptor, TradeResolution
from .errors import ApiError, ConstructionError, DecodeError, HorizonError, Problem, TransportError
from .models import Page
from .web_tools import AiohttpTransport, WebResponse
from .xdr_utils import StellarXdrCodec

# library code stays silent unless the application opts in with logger.enable("stellar_horizon")
logger.disable("stellar_horizon")

__all__ = [
    *_builders_all,
    "HorizonClient",
    "HorizonSettings",
    "load_settings",
    "Dispatcher",
    "Endpoint",
    "IssuedAsset",
    "NativeAsset",
    "Order",
    "RequestDescriptor",
    "TradeResolution",
    "ApiError",
    "ConstructionError",
    "DecodeError",
    "HorizonError",
    "Problem",
    "TransportError",
    "Page",
    "AiohttpTransport",
    "WebResponse",
    "StellarXdrCodec",
]
