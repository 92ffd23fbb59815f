"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ExportConfig:
    """Ledger range to export and how to treat malformed changes.

    ``end_ledger == 0`` means "up to the latest closed checkpoint".
    """

    start_ledger: int = 1
    end_ledger: int = 0
    batch_size: int = 64
    strict_export: bool = False


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"  # json | console


@dataclass
class StellarETLConfig:
    """Top-level configuration."""

    export: ExportConfig = field(default_factory=ExportConfig)
    log: LogConfig = field(default_factory=LogConfig)
