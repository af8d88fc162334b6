# stellar_horizon/interfaces/xdr_codec.py
"""Ledger-native binary codec interface definition."""

from typing import Any, Protocol


class IXdrCodec(Protocol):
    """Interface for decoding base64 XDR fields embedded in Horizon JSON."""

    def decode(self, type_name: str, blob: str) -> Any:
        """Decode ``blob`` as the XDR type ``type_name``; raise ValueError if malformed."""
        ...
