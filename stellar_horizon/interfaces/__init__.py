# stellar_horizon/interfaces/__init__.py
"""Collaborator interface definitions using Protocol."""

from .transport import IHttpTransport
from .xdr_codec import IXdrCodec

__all__ = [
    "IHttpTransport",
    "IXdrCodec",
]
