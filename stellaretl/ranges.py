"""Batch planning over checkpoint-aligned ledger ranges.

The history archive only serves whole checkpoints, so an export range is
extended to the checkpoint that contains its last ledger and then cut into
fixed-size batches.
"""

from __future__ import annotations

from collections.abc import Iterator

from stellaretl.checkpoint import most_recent_checkpoint, next_checkpoint
from stellaretl.models.config import ExportConfig


def export_end(export: ExportConfig, max_seq: int) -> int:
    """Return the last ledger to export.

    With no explicit end ledger this is the latest checkpoint at or before
    *max_seq*; otherwise the checkpoint containing the end ledger, which
    raises OutOfRangeError if it has not closed yet.
    """
    if export.end_ledger == 0:
        return most_recent_checkpoint(max_seq)
    return next_checkpoint(export.end_ledger, max_seq)


def plan_batches(export: ExportConfig, max_seq: int) -> Iterator[tuple[int, int]]:
    """Yield inclusive ``(first, last)`` ledger ranges covering the export.

    Each batch holds ``export.batch_size`` ledgers except possibly the last.
    Raises ValueError if the range is empty, e.g. when no checkpoint has
    closed at or after the start ledger.
    """
    if export.batch_size < 1:
        raise ValueError(f"batch size must be positive, got {export.batch_size}")

    end = export_end(export, max_seq)
    if end < export.start_ledger:
        raise ValueError(f"no closed checkpoint at or after start ledger {export.start_ledger} (max ledger {max_seq})")

    for first in range(export.start_ledger, end + 1, export.batch_size):
        yield first, min(first + export.batch_size - 1, end)
