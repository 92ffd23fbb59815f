"""Conversions from raw ledger values to export-friendly representations."""

from __future__ import annotations

import base64
import binascii
from datetime import UTC, datetime
from fractions import Fraction

from stellaretl.errors import InvalidTimestampError
from stellaretl.models.ledger import MuxedAccount

HASH_LENGTH = 32
STROOPS_PER_UNIT = 10_000_000

# StrKey version byte for ed25519 public keys ("G..." addresses).
_VERSION_BYTE_ACCOUNT_ID = 6 << 3


def time_point_to_utc(time_point: int) -> datetime:
    """Convert a seconds-since-epoch time point to an aware UTC datetime.

    Raises InvalidTimestampError for negative time points and for ones past
    the last representable datetime (year 9999).
    """
    if time_point < 0:
        raise InvalidTimestampError(time_point)
    try:
        return datetime.fromtimestamp(time_point, tz=UTC)
    except (ValueError, OverflowError, OSError) as exc:
        raise InvalidTimestampError(time_point) from exc


def hash_to_hex(value: bytes) -> str:
    """Return the lowercase hex encoding of a 32-byte hash."""
    if len(value) != HASH_LENGTH:
        raise ValueError(f"hash must be {HASH_LENGTH} bytes, got {len(value)}")
    return value.hex()


def stroops_to_real(amount: int) -> float:
    """Convert an amount in stroops, the smallest unit, into whole units."""
    return float(Fraction(amount, STROOPS_PER_UNIT))


def account_address(account: MuxedAccount) -> str:
    """Return the "G..." address of the account underlying *account*.

    The multiplexing id, if any, is dropped: the address is the StrKey
    encoding of the ed25519 key (version byte, key, CRC16-XModem checksum
    little-endian, base32).
    """
    payload = bytes([_VERSION_BYTE_ACCOUNT_ID]) + account.ed25519
    checksum = binascii.crc_hqx(payload, 0).to_bytes(2, "little")
    return base64.b32encode(payload + checksum).decode("ascii")
