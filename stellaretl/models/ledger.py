"""Ledger data structures consumed by the export core."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from stellaretl.errors import UnknownChangeTypeError


class ChangeType(StrEnum):
    """How a ledger entry transitioned across one ledger close."""

    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"


@dataclass(frozen=True)
class LedgerEntry:
    """Opaque snapshot of a single ledger entry."""

    last_modified_ledger_seq: int
    entry_type: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Change:
    """Transition of one ledger entry across one ledger close.

    Created and updated changes always carry ``post``; removed changes always
    carry ``pre``.  Construction fails if either invariant is broken.
    """

    change_type: ChangeType
    pre: LedgerEntry | None = None
    post: LedgerEntry | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.change_type, ChangeType):
            raise UnknownChangeTypeError(self.change_type)
        if self.change_type is ChangeType.REMOVED:
            if self.pre is None:
                raise ValueError("removed change must carry a pre snapshot")
        elif self.post is None:
            raise ValueError(f"{self.change_type} change must carry a post snapshot")


@dataclass(frozen=True)
class MuxedAccount:
    """An account key, optionally multiplexed with a 64-bit sub-account id."""

    ed25519: bytes
    id: int | None = None

    def __post_init__(self) -> None:
        if len(self.ed25519) != 32:
            raise ValueError(f"ed25519 key must be 32 bytes, got {len(self.ed25519)}")


@dataclass(frozen=True)
class LedgerHeader:
    """Subset of the ledger header the core reads."""

    ledger_seq: int
    close_time: int  # seconds since the Unix epoch, signed


@dataclass(frozen=True)
class LedgerCloseMetaV0:
    """Version 0 close-meta body."""

    header: LedgerHeader
    tx_count: int = 0


@dataclass(frozen=True)
class LedgerCloseMeta:
    """Versioned container for a closed ledger.

    Only ``version == 0`` with a populated ``v0`` body is understood.
    """

    version: int
    v0: LedgerCloseMetaV0 | None = None

    def get_v0(self) -> LedgerCloseMetaV0 | None:
        """Return the v0 body, or None if this ledger uses another format."""
        if self.version != 0:
            return None
        return self.v0
