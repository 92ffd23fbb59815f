"""Checkpoint arithmetic for the fixed-interval history archive.

Checkpoints are made every 64 ledgers, when the last closed ledger is one
less than a multiple of 64: ledgers 63, 127, 191, 255, ...  Checkpoint K
covers the inclusive range [K*64, (K+1)*64 - 1].  Each range holds exactly
64 ledgers except the first, which holds 63 because there is no ledger 0.
"""

from __future__ import annotations

from stellaretl.errors import OutOfRangeError

CHECKPOINT_FREQUENCY = 64

_MAX_SEQ = 2**32 - 1


def _check_seq(name: str, value: int) -> None:
    if not 0 <= value <= _MAX_SEQ:
        raise ValueError(f"{name} must be an unsigned 32-bit ledger sequence, got {value}")


def _remainder(seq: int) -> int:
    return (seq + 1) % CHECKPOINT_FREQUENCY


def is_checkpoint(seq: int) -> bool:
    """Return True if *seq* is itself a checkpoint ledger."""
    _check_seq("seq", seq)
    return _remainder(seq) == 0


def next_checkpoint(seq: int, max_seq: int) -> int:
    """Return the first checkpoint at or after *seq*.

    *max_seq* is the highest ledger known to exist.  Raises OutOfRangeError
    if that checkpoint has not closed yet, including when *seq* is itself a
    checkpoint beyond *max_seq*.  Sequence 0 is accepted; rejecting it is the
    caller's job.
    """
    _check_seq("seq", seq)
    _check_seq("max_seq", max_seq)

    remainder = _remainder(seq)
    checkpoint = seq if remainder == 0 else seq + CHECKPOINT_FREQUENCY - remainder
    if checkpoint > max_seq:
        raise OutOfRangeError(checkpoint, max_seq)

    return checkpoint


def most_recent_checkpoint(seq: int) -> int:
    """Return the last checkpoint at or before *seq*.

    Ledgers before the first checkpoint (0-62) map to -1, the boundary
    that precedes the genesis ledger.
    """
    _check_seq("seq", seq)

    remainder = _remainder(seq)
    if remainder == 0:
        return seq
    return seq - remainder
