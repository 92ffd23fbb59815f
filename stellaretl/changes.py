"""Classification of ledger entry changes.

Projects a before/after change onto the entry's latest state and whether it
was deleted, for the transform stage of the exporter.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from stellaretl.errors import UnknownChangeTypeError
from stellaretl.models.ledger import Change, ChangeType, LedgerEntry
from stellaretl.observability.logging import get_logger

_logger = get_logger("changes")


def extract_entry_from_change(change: Change) -> tuple[LedgerEntry, bool]:
    """Return the most recent state of the changed entry and a deleted flag.

    Created and updated changes yield the post snapshot; removed changes
    yield the pre snapshot with ``deleted=True``.
    """
    match change.change_type:
        case ChangeType.CREATED | ChangeType.UPDATED:
            entry, deleted = change.post, False
        case ChangeType.REMOVED:
            entry, deleted = change.pre, True
        case _:
            raise UnknownChangeTypeError(change.change_type)

    if entry is None:
        side = "pre" if deleted else "post"
        raise ValueError(f"{change.change_type} change is missing its {side} snapshot")
    return entry, deleted


def extract_entries(changes: Iterable[Change], strict: bool = False) -> Iterator[tuple[LedgerEntry, bool]]:
    """Classify each change in *changes*.

    With ``strict`` unset, changes with an unrecognised type are logged and
    skipped; with it set the first such change raises UnknownChangeTypeError.
    Callers normally pass ``config.export.strict_export``.
    """
    for index, change in enumerate(changes):
        try:
            yield extract_entry_from_change(change)
        except UnknownChangeTypeError as exc:
            if strict:
                raise
            _logger.warning("change_skipped", index=index, change_type=exc.change_type, error=str(exc))
