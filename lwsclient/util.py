"""Hex-encoded byte strings as used by the light wallet server API."""

from __future__ import annotations

import binascii
from dataclasses import dataclass


def parse_hex(value, size=None):
    """Decode a hex string into bytes.

    When ``size`` is given the result must be exactly that many bytes, and an
    optional ``0x`` prefix is accepted.
    """
    if not isinstance(value, str):
        raise TypeError(f"expected a hex string, got {type(value).__name__}")
    text = value
    if size is not None and text.startswith(("0x", "0X")):
        text = text[2:]
    try:
        raw = binascii.unhexlify(text)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid hex string {value!r}: {exc}") from exc
    if size is not None and len(raw) != size:
        raise ValueError(f"expected {size} bytes of hex, got {len(raw)}")
    return raw


@dataclass(frozen=True)
class HashString:
    """Binary value that travels as a lowercase hex string."""

    raw: bytes

    @classmethod
    def from_hex(cls, value, size=None):
        """Build from a hex string, optionally requiring a fixed byte length."""
        return cls(parse_hex(value, size))

    def to_hex(self):
        """Return the lowercase hex encoding."""
        return self.raw.hex()

    def __str__(self):
        return self.to_hex()