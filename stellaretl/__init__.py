"""Ledger export core: checkpoint arithmetic, change classification and
ledger metadata extraction.
"""

from stellaretl.changes import extract_entries, extract_entry_from_change
from stellaretl.checkpoint import (
    CHECKPOINT_FREQUENCY,
    is_checkpoint,
    most_recent_checkpoint,
    next_checkpoint,
)
from stellaretl.errors import (
    InvalidTimestampError,
    OutOfRangeError,
    StellarETLError,
    UnknownChangeTypeError,
    UnsupportedLedgerFormatError,
)
from stellaretl.ledger_meta import extract_close_time
from stellaretl.ranges import export_end, plan_batches

__all__ = [
    "CHECKPOINT_FREQUENCY",
    "InvalidTimestampError",
    "OutOfRangeError",
    "StellarETLError",
    "UnknownChangeTypeError",
    "UnsupportedLedgerFormatError",
    "export_end",
    "extract_close_time",
    "extract_entries",
    "extract_entry_from_change",
    "is_checkpoint",
    "most_recent_checkpoint",
    "next_checkpoint",
    "plan_batches",
]
