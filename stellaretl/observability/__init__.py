"""Structured logging for stellaretl."""

from stellaretl.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
