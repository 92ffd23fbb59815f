"""Metadata extraction from closed ledgers."""

from __future__ import annotations

from datetime import datetime

from stellaretl.errors import UnsupportedLedgerFormatError
from stellaretl.formatting import time_point_to_utc
from stellaretl.models.ledger import LedgerCloseMeta


def extract_close_time(ledger: LedgerCloseMeta) -> datetime:
    """Return the close time of *ledger* as a UTC datetime.

    Raises UnsupportedLedgerFormatError for anything but a v0 ledger and
    InvalidTimestampError if the header's close time is negative or beyond
    what a datetime can represent.
    """
    v0 = ledger.get_v0()
    if v0 is None:
        raise UnsupportedLedgerFormatError(ledger.version)

    return time_point_to_utc(v0.header.close_time)
