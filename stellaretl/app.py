"""Bootstrap for export tooling built on stellaretl.

Startup order: config -> logging.
"""

from __future__ import annotations

from stellaretl.config import load_config
from stellaretl.models.config import StellarETLConfig
from stellaretl.observability.logging import get_logger, setup_logging


def init() -> StellarETLConfig:
    """Load configuration from the environment and configure logging."""
    config = load_config()
    setup_logging(config.log)
    get_logger("app").info(
        "stellaretl_initialized",
        start_ledger=config.export.start_ledger,
        end_ledger=config.export.end_ledger,
        strict_export=config.export.strict_export,
    )
    return config
