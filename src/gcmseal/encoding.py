"""Hex encoding for values crossing a textual boundary."""

from __future__ import annotations

import binascii

from .exceptions import DecodeError


def encode_hex(data: bytes) -> str:
    """Return *data* as a lowercase hex string."""
    return data.hex()


def decode_hex(value: str, field: str = "value") -> bytes:
    """Decode a hex string, accepting either letter case.

    Whitespace, odd lengths and non-hex characters are rejected.

    Raises
    ------
    DecodeError
        If *value* is not a well-formed hex string.
    """
    if not isinstance(value, str):
        raise DecodeError(field, f"expected str, got {type(value).__name__}")
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(field, "malformed hex string", cause=e) from e
