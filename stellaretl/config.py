"""Configuration loading from STELLARETL_* environment variables.

Invalid values fail loudly with ValueError rather than being clamped: a
mistyped ledger bound would otherwise silently export the wrong range.
"""

from __future__ import annotations

import os

from stellaretl.models.config import ExportConfig, LogConfig, StellarETLConfig

_PREFIX = "STELLARETL_"
_MAX_UINT32 = 2**32 - 1
_TRUE = {"true", "1", "yes"}
_FALSE = {"false", "0", "no", ""}


def _raw(key: str) -> str | None:
    return os.environ.get(_PREFIX + key)


def _ledger_seq(key: str, default: int, minimum: int = 0) -> int:
    raw = _raw(key)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{_PREFIX}{key} must be an integer, got {raw!r}") from None
    if not minimum <= value <= _MAX_UINT32:
        raise ValueError(f"{_PREFIX}{key} must be within [{minimum}, {_MAX_UINT32}], got {value}")
    return value


def _flag(key: str, default: bool) -> bool:
    raw = _raw(key)
    if raw is None:
        return default
    if raw.lower() in _TRUE:
        return True
    if raw.lower() in _FALSE:
        return False
    raise ValueError(f"{_PREFIX}{key} must be a boolean, got {raw!r}")


def _choice(key: str, default: str, valid: tuple[str, ...]) -> str:
    value = (_raw(key) or default).lower()
    if value not in valid:
        raise ValueError(f"Invalid {_PREFIX}{key}: {value}. Must be one of {valid}")
    return value


def load_config() -> StellarETLConfig:
    """Build the configuration from the environment."""
    export = ExportConfig(
        start_ledger=_ledger_seq("START_LEDGER", 1, minimum=1),
        end_ledger=_ledger_seq("END_LEDGER", 0),
        batch_size=_ledger_seq("BATCH_SIZE", 64, minimum=1),
        strict_export=_flag("STRICT_EXPORT", False),
    )
    if export.end_ledger and export.end_ledger < export.start_ledger:
        raise ValueError(f"end ledger {export.end_ledger} precedes start ledger {export.start_ledger}")

    return StellarETLConfig(
        export=export,
        log=LogConfig(
            level=_choice("LOG_LEVEL", "info", ("debug", "info", "warning", "error")),
            format=_choice("LOG_FORMAT", "json", ("json", "console")),
        ),
    )
