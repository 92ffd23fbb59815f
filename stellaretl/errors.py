"""Exceptions raised by the stellaretl core.

Every error is raised to the immediate caller; nothing in the core retries.
"""

from __future__ import annotations


class StellarETLError(Exception):
    """Base class for all stellaretl errors."""


class OutOfRangeError(StellarETLError):
    """The requested checkpoint lies beyond the highest known ledger.

    Recoverable: the caller may wait for more ledgers or shrink the range.
    """

    def __init__(self, checkpoint: int, max_seq: int) -> None:
        super().__init__(f"The checkpoint ledger {checkpoint} is greater than the max ledger number {max_seq}")
        self.checkpoint = checkpoint
        self.max_seq = max_seq


class UnsupportedLedgerFormatError(StellarETLError):
    """The ledger uses a close-meta version the extractor does not understand."""

    def __init__(self, version: int) -> None:
        super().__init__(f"could not extract v0 info from ledger (version={version})")
        self.version = version


class InvalidTimestampError(StellarETLError):
    """A close time was negative, which indicates a corrupt ledger."""

    def __init__(self, value: int) -> None:
        super().__init__(f"The timepoint is negative: {value}")
        self.value = value


class UnknownChangeTypeError(StellarETLError):
    """A change carried a tag outside the created/updated/removed set."""

    def __init__(self, change_type: object) -> None:
        super().__init__(f"unable to extract ledger entry type from change: {change_type!r}")
        self.change_type = change_type
