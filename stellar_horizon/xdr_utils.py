# stellar_horizon/xdr_utils.py
"""XDR and base64 helpers backed by stellar_sdk."""

import base64
import binascii
from typing import Any

from stellar_sdk import xdr as stellar_xdr


class StellarXdrCodec:
    """Decodes base64 XDR strings into ``stellar_sdk.xdr`` objects by type name."""

    def decode(self, type_name: str, blob: str) -> Any:
        """
        Decode one XDR value.

        Args:
            type_name: Name of a class in stellar_sdk.xdr, e.g. "LedgerHeader"
            blob: Base64-encoded XDR

        Returns:
            Instance of the requested stellar_sdk.xdr class
        """
        xdr_type = getattr(stellar_xdr, type_name, None)
        if xdr_type is None or not hasattr(xdr_type, "from_xdr"):
            raise ValueError(f"unknown XDR type {type_name}")
        try:
            return xdr_type.from_xdr(blob)
        except Exception as e:
            # the unpacker raises several unrelated types on truncated input
            raise ValueError(f"malformed {type_name}: {e}") from e


def decode_data_value(data_value: str) -> bytes:
    """
    Decode a base64-encoded account data entry.

    Args:
        data_value: Base64-encoded string

    Returns:
        Raw bytes of the entry
    """
    try:
        return base64.b64decode(data_value.encode('ascii'), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise ValueError(f"data value is not base64: {e}") from e
