"""Core data structures for stellaretl."""

from stellaretl.models.config import ExportConfig, LogConfig, StellarETLConfig
from stellaretl.models.ledger import (
    Change,
    ChangeType,
    LedgerCloseMeta,
    LedgerCloseMetaV0,
    LedgerEntry,
    LedgerHeader,
    MuxedAccount,
)

__all__ = [
    "Change",
    "ChangeType",
    "ExportConfig",
    "LedgerCloseMeta",
    "LedgerCloseMetaV0",
    "LedgerEntry",
    "LedgerHeader",
    "LogConfig",
    "MuxedAccount",
    "StellarETLConfig",
]
